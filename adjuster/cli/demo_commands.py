"""Demo command implementations for the adjuster CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Type

import typer
from rich.table import Table

from ..constants import EXIT_CONFIG_ERROR
from ..core import adjust_stream
from ..error_handling import ConfigurationError, InputError, InputExhaustedError, InputMalformedError
from ..input_source import IntegerReader
from ..utils.logging import console, log_error, scenario_table
from .shared import setup_settings


@dataclass(frozen=True)
class Scenario:
    name: str
    text: str
    expected: Optional[int] = None
    consumed: int = 0
    error: Optional[Type[InputError]] = None
    int_bits: Optional[int] = None

    @property
    def expected_label(self) -> str:
        return self.error.__name__ if self.error else str(self.expected)


SCENARIOS: List[Scenario] = [
    Scenario("add", "3 4", expected=7, consumed=2),
    Scenario("subtract", "10 2", expected=8, consumed=2),
    Scenario("threshold", "5", expected=5, consumed=1),
    Scenario("add-negative", "4 -1", expected=3, consumed=2),
    Scenario("threshold-trailing", "5 99", expected=5, consumed=1),
    Scenario("missing-operand", "3", error=InputExhaustedError),
    Scenario("malformed", "abc", error=InputMalformedError),
    Scenario("empty", "", error=InputExhaustedError),
    Scenario("wrap-32", "2147483647 -1", expected=-2147483648, consumed=2, int_bits=32),
    Scenario("multiline", "3\n4\n", expected=7, consumed=2),
]


def find_scenario(name: str) -> Scenario:
    for scenario in SCENARIOS:
        if scenario.name == name:
            return scenario
    raise KeyError(name)


def run_scenario(scenario: Scenario) -> tuple[bool, str, int]:
    """Run one scenario; returns (passed, actual label, values consumed)."""
    reader = IntegerReader.from_text(scenario.text, int_bits=scenario.int_bits)
    try:
        adjustment = adjust_stream(reader)
    except InputError as e:
        return scenario.error is not None and isinstance(e, scenario.error), type(e).__name__, reader.consumed
    passed = (
        scenario.error is None
        and adjustment.result == scenario.expected
        and reader.consumed == scenario.consumed
    )
    return passed, str(adjustment.result), reader.consumed


def demo_run(
    name: Optional[str] = typer.Option(None, help="Specific scenario to run (default: all)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level for diagnostics on stderr"),
) -> None:
    """Run the built-in scenarios and report expected vs actual."""
    try:
        setup_settings(log_level=log_level)
    except ConfigurationError as e:
        log_error(str(e))
        raise typer.Exit(code=EXIT_CONFIG_ERROR)

    scenarios = SCENARIOS
    if name:
        try:
            scenarios = [find_scenario(name)]
        except KeyError:
            console.print(
                f"[red]Scenario not found:[/red] {name}. Available: {', '.join(s.name for s in SCENARIOS)}"
            )
            raise typer.Exit(code=1)

    table = scenario_table("Conditional adjuster scenarios")
    failures = 0
    for scenario in scenarios:
        passed, actual, consumed = run_scenario(scenario)
        if not passed:
            failures += 1
        table.add_row(
            scenario.name,
            repr(scenario.text),
            scenario.expected_label,
            actual,
            str(consumed),
            "[green]pass[/green]" if passed else "[red]FAIL[/red]",
        )
    console.print(table)

    if failures:
        console.print(f"[red]{failures} of {len(scenarios)} scenarios failed[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]All {len(scenarios)} scenarios passed[/green]")


def demo_list() -> None:
    """List the built-in scenarios."""
    table = Table(title="Scenarios")
    table.add_column("name")
    table.add_column("input")
    table.add_column("expected", justify="right")
    for scenario in SCENARIOS:
        table.add_row(scenario.name, repr(scenario.text), scenario.expected_label)
    console.print(table)
