"""g2bi CLI: generate building instructions from LXFML groups."""

import logging
from pathlib import Path

import typer

from g2bi import __version__

from .config import load_config, write_config_template
from .core import preview, regenerate
from .errors import G2biError
from .logging import configure_logging
from .output import OutputContext, instruction_summary

logger = logging.getLogger(__name__)

EXAMPLE_USAGE = "Example usage:\ng2bi design.lxfml"


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"g2bi {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="g2bi",
    help="Generate LXFML building instructions from the model's group hierarchy.",
    add_completion=False,
)


@app.command()
def main(
    ctx: typer.Context,
    input_arg: Path | None = typer.Argument(
        None,
        metavar="[INPUT]",
        help="LXFML file to generate building instructions from.",
        show_default=False,
    ),
    input_file: Path | None = typer.Option(
        None,
        "--input",
        "-i",
        help="LXFML file to generate building instructions from.",
    ),
    output_file: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="File to write the output to. Defaults to overwriting the input file.",
    ),
    substep: int | None = typer.Option(
        None,
        "--substep",
        "-s",
        help="The maximum depth of substeps to generate. [default: 3]",
        show_default=False,
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file (defaults to ./g2bi.toml if present)",
    ),
    init_config: Path | None = typer.Option(
        None,
        "--init-config",
        help="Write a config template to this path and exit",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Print the generated steps without writing any file",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging with timestamps and source paths",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Generate building instructions from an LXFML file."""
    console = configure_logging(
        verbosity=verbose,
        quiet=quiet or json_output,
        no_color=no_color,
        debug=debug,
    )
    out = OutputContext(console=console, json_mode=json_output)

    if init_config is not None:
        path = write_config_template(init_config)
        out.success(f"Created config template: {path}", {"config": str(path)})
        return

    input_path = input_file or input_arg
    if input_path is None:
        if json_output:
            out.print_json({"error": "input option is missing"})
        else:
            typer.echo(ctx.get_help())
            typer.echo("\nERROR(S):\n  input option is missing.\n")
            typer.echo(EXAMPLE_USAGE)
        return

    output_path = output_file or input_path

    try:
        config = load_config(config_file)
        max_depth = substep if substep is not None else config.instructions.max_substep_depth
        logger.debug("Maximum substep depth: %d", max_depth)

        if dry_run:
            instruction = preview(input_path, max_depth, config.instructions.guide_name)
        else:
            instruction = regenerate(
                input_path,
                output_path,
                max_depth,
                config.instructions.guide_name,
                indent=config.output.indent,
            )
    except G2biError as e:
        out.error(str(e), {"input": str(input_path)})
        raise typer.Exit(1) from None

    summary = {
        "input": str(input_path),
        "output": None if dry_run else str(output_path),
        "dry_run": dry_run,
        **instruction_summary(instruction),
    }

    if dry_run:
        out.print("[cyan][DRY RUN][/cyan] Would write:")
        out.print(f"  {output_path}")
        out.print_instruction(instruction)
        out.print_json(summary)
        return

    out.print_instruction(instruction)
    out.success(
        f"Generated {instruction.step_count} step(s) in {instruction.name}: {output_path}",
        summary,
    )
