from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from .cli.demo_commands import demo_list, demo_run
from .cli.shared import open_input, setup_settings
from .constants import EXIT_CONFIG_ERROR, EXIT_INPUT_ERROR
from .core import adjust_stream
from .error_handling import AdjusterError, ConfigurationError, InputError
from .input_source import IntegerReader
from .utils.logging import log_error, render_adjustment


logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Adjust an integer against the threshold 5.")
demo = typer.Typer(add_completion=False, help="Built-in scenarios.")
app.add_typer(demo, name="demo")

demo.command("run")(demo_run)
demo.command("list")(demo_list)


@app.command()
def run(
    input_path: Optional[Path] = typer.Option(
        None, "--input", "-i", help="Read integers from this file instead of stdin"
    ),
    explain: Optional[bool] = typer.Option(
        None, "--explain/--no-explain", help="Show the chosen branch on stderr"
    ),
    int_bits: Optional[int] = typer.Option(
        None, "--int-bits", help="Wrap results to this signed integer width (0 = unbounded)"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL"),
    config_overrides: Optional[List[str]] = typer.Option(
        None, "--set", help="Override a setting, e.g. --set int_bits=32"
    ),
) -> None:
    """Read x (and maybe one more integer) and print the adjusted value."""
    try:
        settings = setup_settings(
            log_level=log_level,
            int_bits=int_bits,
            explain=explain,
            config_overrides=config_overrides,
        )
    except ConfigurationError as e:
        log_error(str(e))
        raise typer.Exit(code=EXIT_CONFIG_ERROR)

    try:
        with open_input(input_path) as stream:
            reader = IntegerReader(stream, int_bits=settings.width)
            adjustment = adjust_stream(reader)
    except InputError as e:
        logger.info("run aborted after %d value(s): %s", e.position - 1, e)
        log_error(str(e))
        raise typer.Exit(code=EXIT_INPUT_ERROR)
    except AdjusterError as e:
        log_error(str(e))
        raise typer.Exit(code=EXIT_INPUT_ERROR)

    logger.info("%s (%s, consumed %d)", adjustment.expression(), adjustment.branch.value, adjustment.consumed)
    if settings.explain:
        render_adjustment(adjustment)
    typer.echo(adjustment.result)


if __name__ == "__main__":
    app()
