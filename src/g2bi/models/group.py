"""Group model for the source hierarchy.

Groups mirror the ``Group`` elements of an LXFML ``GroupSystem``. They
are read-only inputs to the instruction builder and carry no parent
pointer: sibling information is supplied by whoever walks the tree.
"""

from pydantic import BaseModel, Field


def parse_part_refs(raw: str | None) -> list[str]:
    """Normalize a comma-separated ``partRefs`` attribute value.

    Entries are stripped and empty entries dropped, so whitespace-only
    input yields no references.

    Example:
        >>> parse_part_refs(" a,, b")
        ['a', 'b']
    """
    if not raw:
        return []
    return [ref.strip() for ref in raw.split(",") if ref.strip()]


class Group(BaseModel):
    """A node of the group hierarchy.

    Attributes:
        part_refs: Part reference identifiers attached to this group, in order.
        children: Nested groups, in document order.
    """

    part_refs: list[str] = Field(default_factory=list, description="Part reference identifiers")
    children: list["Group"] = Field(default_factory=list, description="Child groups in order")

    @classmethod
    def from_part_refs(cls, raw: str | None, children: list["Group"] | None = None) -> "Group":
        """Create a group from a raw ``partRefs`` attribute value."""
        return cls(part_refs=parse_part_refs(raw), children=children or [])

    @property
    def has_part_refs(self) -> bool:
        """True if the group carries at least one non-empty part reference."""
        return bool(self.part_refs)
