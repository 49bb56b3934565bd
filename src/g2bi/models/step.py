"""Step models for generated building instructions.

A step either attaches part references directly or acts as a container
for numbered sub-steps. The tree is built once per run and handed to
the serializer; nothing mutates it afterwards.
"""

from collections.abc import Iterator

from pydantic import BaseModel, Field

from ..constants import DEFAULT_GUIDE_NAME


class Step(BaseModel):
    """A single building step.

    Attributes:
        name: Step name, e.g. ``Step2`` or ``Step2Substep1``.
        part_refs: Part references placed in this step.
        substeps: Nested steps, in build order.

    Example:
        >>> step = Step(name="Step1", part_refs=["x", "y"])
        >>> step.depth
        0
    """

    name: str = Field(description="Step name, unique within its parent scope")
    part_refs: list[str] = Field(default_factory=list, description="Part references")
    substeps: list["Step"] = Field(default_factory=list, description="Nested sub-steps")

    def iter_steps(self) -> Iterator["Step"]:
        """Yield this step and all nested sub-steps, depth first."""
        yield self
        for substep in self.substeps:
            yield from substep.iter_steps()

    @property
    def depth(self) -> int:
        """Number of sub-step levels nested below this step."""
        if not self.substeps:
            return 0
        return 1 + max(substep.depth for substep in self.substeps)


class BuildingInstruction(BaseModel):
    """Root container of a generated step tree."""

    name: str = Field(default=DEFAULT_GUIDE_NAME, description="Building guide name")
    steps: list[Step] = Field(default_factory=list, description="Top-level steps")

    def iter_steps(self) -> Iterator[Step]:
        """Yield every step in build order."""
        for step in self.steps:
            yield from step.iter_steps()

    @property
    def step_count(self) -> int:
        return sum(1 for _ in self.iter_steps())

    @property
    def part_ref_count(self) -> int:
        return sum(len(step.part_refs) for step in self.iter_steps())

    @property
    def max_depth(self) -> int:
        """Deepest sub-step nesting below any top-level step."""
        return max((step.depth for step in self.steps), default=0)
