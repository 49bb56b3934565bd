"""g2bi-specific errors."""


class G2biError(Exception):
    """Base exception for g2bi errors."""


class InputNotFoundError(G2biError):
    """Raised when the input document does not exist."""


class DocumentReadError(G2biError):
    """Raised when the input document cannot be read."""


class DocumentWriteError(G2biError):
    """Raised when the output document cannot be written."""


class NotLxfmlError(G2biError):
    """Raised when the input is not an LXFML document."""


class MissingGroupsError(G2biError):
    """Raised when the document has no group hierarchy."""


class GroupNestingError(G2biError):
    """Raised when the group hierarchy is too deep to walk."""


class ConfigError(G2biError):
    """Raised when the configuration file is missing or invalid."""
