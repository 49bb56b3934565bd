"""Building instruction generation from group hierarchies.

Walks a tree of nested groups depth first and emits numbered steps.
A group with siblings and children gets its own sub-step container
until the configured depth is reached; otherwise its children are
flattened into the current scope.
"""

import logging

from ..constants import DEFAULT_GUIDE_NAME
from ..models import BuildingInstruction, Group, Step

logger = logging.getLogger(__name__)


def step_name(counter: int, depth: int, parent_name: str | None) -> str:
    """Name a step created at the given counter value and sub-step depth.

    Args:
        counter: Counter value of the enclosing scope before the increment
        depth: Sub-step depth of the scope (0 for top-level steps)
        parent_name: Name of the step owning the scope (unused at depth 0)

    Returns:
        ``Step<n>`` at depth 0, ``<parent_name>Substep<n>`` below it
    """
    if depth == 0:
        return f"Step{counter}"
    return f"{parent_name}Substep{counter}"


def generate_steps(
    group: Group,
    counter: int,
    depth: int,
    max_depth: int,
    *,
    has_siblings: bool,
    parent_name: str | None = None,
) -> tuple[list[Step], int]:
    """Generate the steps one group contributes to its enclosing scope.

    Args:
        group: Group to process
        counter: Next step number in the enclosing scope
        depth: Current sub-step depth
        max_depth: Maximum sub-step depth
        has_siblings: Whether the group's parent holds other groups besides it
        parent_name: Name of the step owning the enclosing scope

    Returns:
        Tuple of (steps to append to the scope, next step number)
    """
    steps: list[Step] = []

    if group.has_part_refs:
        name = step_name(counter, depth, parent_name)
        logger.debug("Step %s: %d part ref(s)", name, len(group.part_refs))
        steps.append(Step(name=name, part_refs=list(group.part_refs)))
        counter += 1

    if not group.children:
        return steps, counter

    children_have_siblings = len(group.children) > 1

    if has_siblings and depth < max_depth:
        name = step_name(counter, depth, parent_name)
        counter += 1
        logger.debug("Step %s: sub-step container for %d group(s)", name, len(group.children))

        substeps: list[Step] = []
        sub_counter = 1
        for child in group.children:
            child_steps, sub_counter = generate_steps(
                child,
                sub_counter,
                depth + 1,
                max_depth,
                has_siblings=children_have_siblings,
                parent_name=name,
            )
            substeps.extend(child_steps)
        steps.append(Step(name=name, substeps=substeps))
    else:
        for child in group.children:
            child_steps, counter = generate_steps(
                child,
                counter,
                depth,
                max_depth,
                has_siblings=children_have_siblings,
                parent_name=parent_name,
            )
            steps.extend(child_steps)

    return steps, counter


def build_steps(groups: list[Group], max_substep_depth: int) -> list[Step]:
    """Build the top-level step sequence for a group system.

    Numbering runs across all top-level groups without resetting. Top-level
    groups count as siblings of one another.

    Args:
        groups: Top-level groups in document order
        max_substep_depth: Maximum sub-step nesting; negative disables sub-steps

    Returns:
        Ordered top-level steps
    """
    steps: list[Step] = []
    counter = 1
    has_siblings = len(groups) > 1
    for group in groups:
        group_steps, counter = generate_steps(
            group, counter, 0, max_substep_depth, has_siblings=has_siblings
        )
        steps.extend(group_steps)
    return steps


def build_instruction(
    groups: list[Group],
    max_substep_depth: int,
    name: str = DEFAULT_GUIDE_NAME,
) -> BuildingInstruction:
    """Build a named building instruction for a group system."""
    instruction = BuildingInstruction(name=name, steps=build_steps(groups, max_substep_depth))
    logger.debug(
        "Built %s: %d step(s), %d part ref(s)",
        instruction.name,
        instruction.step_count,
        instruction.part_ref_count,
    )
    return instruction
