"""zooinspect CLI Display Components.

Rich-based renderers for the CLI:
- Status line table
- Zoo action table
- Scenario overview
"""

from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from zooinspect.inspection.simulated import ActionKind, ZooAction
from zooinspect.inspection.status import SubjectKind, Verdict, parse_status_line
from zooinspect.schemas.scenario import ZooScenario

VERDICT_STYLES = {
    Verdict.OK: "bold green",
    Verdict.WARNING: "bold red",
}

ACTION_STYLES = {
    ActionKind.CAPTURE: "dim",
    ActionKind.CLOSE: "yellow",
    ActionKind.SECURITY: "red",
    ActionKind.MAINTENANCE: "magenta",
    ActionKind.VETERINARY: "cyan",
}


def render_status_lines(lines: list[str]) -> Table:
    """Render status lines as a table, one row per line."""
    table = Table(title="Inspection Status", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Subject")
    table.add_column("Id / Name")
    table.add_column("Verdict")

    for index, line in enumerate(lines, start=1):
        status = parse_status_line(line)
        subject_style = "bold" if status.kind == SubjectKind.ZOO else ""
        table.add_row(
            str(index),
            Text(status.kind.value, style=subject_style),
            Text(status.subject),
            Text(status.verdict.value, style=VERDICT_STYLES[status.verdict]),
        )
    return table


def render_actions(actions: list[ZooAction], include_captures: bool = False) -> Table:
    """Render the requests the zoo received, in call order."""
    table = Table(title="Zoo Actions")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Action")
    table.add_column("Target")

    shown = actions if include_captures else [a for a in actions if a.kind != ActionKind.CAPTURE]
    for index, action in enumerate(shown, start=1):
        table.add_row(
            str(index),
            Text(action.kind.value, style=ACTION_STYLES[action.kind]),
            Text(action.target),
        )
    return table


def render_verdict(zoo_line: str) -> Panel:
    """Render the zoo-level verdict as a panel."""
    status = parse_status_line(zoo_line)
    style = VERDICT_STYLES[status.verdict]
    icon = "✅" if status.verdict == Verdict.OK else "⚠️"
    return Panel(
        Text(f"{icon}  Zoo {status.subject}: {status.verdict.value}", style=style),
        border_style=style,
        expand=False,
    )


def render_scenario(scenario: ZooScenario) -> Table:
    """Render a scenario's enclosures and scripted verdicts."""
    title = f"Zoo {escape(scenario.id)}"
    if scenario.name:
        title += f" ({escape(scenario.name)})"
    table = Table(title=title)
    table.add_column("Enclosure")
    table.add_column("Safe")
    table.add_column("Animal")
    table.add_column("Sick")

    for enclosure in scenario.enclosures:
        table.add_row(
            Text(enclosure.id),
            Text("yes", style="green") if enclosure.safe else Text("no", style="red"),
            Text(enclosure.animal.name),
            Text("yes", style="red") if enclosure.animal.sick else Text("no", style="green"),
        )
    return table
