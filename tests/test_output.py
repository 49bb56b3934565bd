"""Tests for output formatting."""

import io
import json

from rich.console import Console

from g2bi.models import BuildingInstruction, Step
from g2bi.output import OutputContext, instruction_summary


def make_instruction() -> BuildingInstruction:
    return BuildingInstruction(
        steps=[
            Step(name="Step1", part_refs=["x", "y"]),
            Step(name="Step2", substeps=[Step(name="Step2Substep1", part_refs=["z"])]),
        ]
    )


def make_ctx(json_mode: bool = False) -> tuple[OutputContext, io.StringIO]:
    output = io.StringIO()
    console = Console(file=output, force_terminal=False, width=120)
    return OutputContext(console=console, json_mode=json_mode), output


class TestOutputContextPrint:
    """Tests for OutputContext.print method."""

    def test_print_in_normal_mode(self) -> None:
        ctx, output = make_ctx()
        ctx.print("Hello world")
        assert "Hello world" in output.getvalue()

    def test_print_suppressed_in_json_mode(self) -> None:
        ctx, output = make_ctx(json_mode=True)
        ctx.print("Hello world")
        assert output.getvalue() == ""


class TestOutputContextMessages:
    """Tests for error and success messages."""

    def test_error_in_normal_mode(self) -> None:
        ctx, output = make_ctx()
        ctx.error("Something failed")
        assert "Error: Something failed" in output.getvalue()

    def test_error_in_json_mode(self, capsys) -> None:
        ctx, _ = make_ctx(json_mode=True)
        ctx.error("Something failed", {"input": "a.lxfml"})
        data = json.loads(capsys.readouterr().out)
        assert data == {"error": "Something failed", "input": "a.lxfml"}

    def test_success_in_json_mode(self, capsys) -> None:
        ctx, _ = make_ctx(json_mode=True)
        ctx.success("Done", {"steps": 3})
        data = json.loads(capsys.readouterr().out)
        assert data == {"success": "Done", "steps": 3}

    def test_success_in_normal_mode(self) -> None:
        ctx, output = make_ctx()
        ctx.success("Done")
        assert "Done" in output.getvalue()


class TestPrintInstruction:
    """Tests for OutputContext.print_instruction method."""

    def test_renders_tree(self) -> None:
        ctx, output = make_ctx()
        ctx.print_instruction(make_instruction())
        text = output.getvalue()
        assert "BuildingGuide1" in text
        assert "Step1" in text
        assert "x, y" in text
        assert "Step2Substep1" in text

    def test_suppressed_in_json_mode(self) -> None:
        ctx, output = make_ctx(json_mode=True)
        ctx.print_instruction(make_instruction())
        assert output.getvalue() == ""


def test_instruction_summary() -> None:
    assert instruction_summary(make_instruction()) == {
        "guide": "BuildingGuide1",
        "steps": 3,
        "part_refs": 3,
        "max_depth": 1,
    }
