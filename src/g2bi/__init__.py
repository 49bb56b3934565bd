"""g2bi: generate LXFML building instructions from group hierarchies."""

__version__ = "0.1.0"
