"""Output formatting for g2bi."""

import json
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.tree import Tree

from .models import BuildingInstruction, Step


@dataclass
class OutputContext:
    """Context for output formatting."""

    console: Console
    json_mode: bool = False

    def print(self, message: str, style: str | None = None) -> None:
        """Print message respecting output mode."""
        if not self.json_mode:
            self.console.print(message, style=style)

    def print_json(self, data: dict[str, Any]) -> None:
        """Print JSON data."""
        if self.json_mode:
            print(json.dumps(data, indent=2, default=str))

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print error in appropriate format."""
        if self.json_mode:
            self.print_json({"error": message, **(data or {})})
        else:
            self.console.print(f"[red]Error: {message}[/red]")

    def success(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print success message in appropriate format."""
        if self.json_mode:
            self.print_json({"success": message, **(data or {})})
        else:
            self.console.print(f"[green]{message}[/green]")

    def print_instruction(self, instruction: BuildingInstruction) -> None:
        """Render the step tree of an instruction."""
        if self.json_mode:
            return
        tree = Tree(f"[bold]{instruction.name}[/bold]")
        for step in instruction.steps:
            _add_step(tree, step)
        self.console.print(tree)


def _add_step(parent: Tree, step: Step) -> None:
    label = step.name
    if step.part_refs:
        label += f" [dim]({', '.join(step.part_refs)})[/dim]"
    node = parent.add(label)
    for substep in step.substeps:
        _add_step(node, substep)


def instruction_summary(instruction: BuildingInstruction) -> dict[str, Any]:
    """Summarize an instruction for JSON output."""
    return {
        "guide": instruction.name,
        "steps": instruction.step_count,
        "part_refs": instruction.part_ref_count,
        "max_depth": instruction.max_depth,
    }
