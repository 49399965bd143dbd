from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..core import Adjustment, Branch
from ..constants import THRESHOLD


# stdout carries only the result, so everything rendered here goes to stderr
console = Console(stderr=True)


_BRANCH_STYLE = {
    Branch.ADD: "green",
    Branch.SUBTRACT: "magenta",
    Branch.UNCHANGED: "cyan",
}


def log_panel(title: str, body: str) -> None:
    console.print(Panel.fit(body, title=title))


def log_error(message: str) -> None:
    console.print(f"[red]error:[/red] {escape(message)}", highlight=False)


def render_adjustment(adjustment: Adjustment) -> None:
    """Show which branch ran and why."""
    style = _BRANCH_STYLE[adjustment.branch]
    if adjustment.branch is Branch.ADD:
        reason = f"{adjustment.initial} < {THRESHOLD}"
    elif adjustment.branch is Branch.SUBTRACT:
        reason = f"{adjustment.initial} > {THRESHOLD}"
    else:
        reason = f"{adjustment.initial} == {THRESHOLD}"
    body = "\n".join([
        f"condition: {reason}",
        f"branch:    [{style}]{adjustment.branch.value}[/{style}]",
        f"result:    {adjustment.expression()}",
        f"consumed:  {adjustment.consumed}",
    ])
    log_panel("Adjustment", body)


def scenario_table(title: str) -> Table:
    table = Table(title=title)
    table.add_column("scenario")
    table.add_column("input")
    table.add_column("expected", justify="right")
    table.add_column("actual", justify="right")
    table.add_column("consumed", justify="right")
    table.add_column("status")
    return table
