"""Pydantic data models for g2bi.

This package defines the data structures shared by the builder and the
LXFML collaborator:
- Source hierarchy (Group)
- Generated instructions (Step, BuildingInstruction)

Example:
    >>> from g2bi.models import Group
    >>> Group.from_part_refs("x,y").part_refs
    ['x', 'y']
"""

from .group import Group, parse_part_refs
from .step import BuildingInstruction, Step

__all__ = [
    "BuildingInstruction",
    "Group",
    "Step",
    "parse_part_refs",
]
