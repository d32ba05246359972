"""zooinspect CLI - Main Entry Point.

Usage:
    zooinspect run                      # Inspect the default sample zoo
    zooinspect run config/zoos/z1.yaml  # Inspect a scenario file
    zooinspect run healthy_zoo.yaml --json
    zooinspect validate my_zoo.yaml     # Check a scenario file
    zooinspect show my_zoo.yaml         # Show scripted verdicts
"""

from __future__ import annotations

import json
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from zooinspect import __version__
from zooinspect.core.logging_config import setup_logging
from zooinspect.core.settings import resolve_scenario_path
from zooinspect.inspection import (
    LoggerInspectionLog,
    MultiInspectionLog,
    RecordingInspectionLog,
    Verdict,
    ZooInspector,
    parse_status_line,
)
from zooinspect.inspection.simulated import build_simulation
from zooinspect.schemas.scenario import ZooScenario, load_zoo_scenario

logger = logging.getLogger("zooinspect.cli")

# ============================================
# App Definition
# ============================================
app = typer.Typer(
    name="zooinspect",
    help="Zoo enclosure and animal inspection",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

# Exit code for --fail-on-warning
WARNING_EXIT_CODE = 2


# ============================================
# Common Options
# ============================================
ScenarioArgument = Annotated[
    str | None,
    typer.Argument(help="Scenario file, or a name under the scenarios directory"),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Output as JSON")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Verbose logging")]


def _load_scenario(scenario: str | None) -> ZooScenario:
    """Load a scenario, reporting failures and exiting with code 1."""
    path = resolve_scenario_path(scenario)
    try:
        return load_zoo_scenario(path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load scenario {path}: {e}")
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"zooinspect {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version"),
    ] = False,
) -> None:
    """Zoo enclosure and animal inspection."""


# ============================================
# Commands
# ============================================
@app.command("run")
def run(
    scenario: ScenarioArgument = None,
    json_output: JsonOption = False,
    verbose: VerboseOption = False,
    fail_on_warning: Annotated[
        bool,
        typer.Option("--fail-on-warning", help="Exit with code 2 when the zoo verdict is WARNING"),
    ] = False,
    show_captures: Annotated[
        bool,
        typer.Option("--captures", help="Include picture captures in the action table"),
    ] = False,
) -> None:
    """Run an inspection over a simulated zoo.

    Example:
        zooinspect run sample_zoo.yaml
        zooinspect run sample_zoo.yaml --json --fail-on-warning
    """
    setup_logging(verbose)
    zoo_scenario = _load_scenario(scenario)

    zoo, recognition = build_simulation(zoo_scenario)
    recording_log = RecordingInspectionLog()
    inspector = ZooInspector(recognition, MultiInspectionLog(recording_log, LoggerInspectionLog()))

    try:
        inspector.inspect(zoo)
    except Exception as e:
        logger.exception(f"Inspection of zoo {zoo.id} failed: {e}")
        console.print(f"[bold red]❌ Inspection Failed: {escape(str(e))}[/bold red]")
        raise typer.Exit(1)

    lines = recording_log.last
    verdict = parse_status_line(lines[-1]).verdict

    if json_output:
        print(json.dumps(
            {
                "zoo": zoo.id,
                "verdict": verdict.value,
                "lines": lines,
                "actions": [a.to_dict() for a in zoo.actions],
            },
            indent=2,
        ))
    else:
        from zooinspect.cli.display import render_actions, render_status_lines, render_verdict

        console.print(render_status_lines(lines))
        if zoo.dispatches or show_captures:
            console.print(render_actions(zoo.actions, include_captures=show_captures))
        console.print(render_verdict(lines[-1]))

    if fail_on_warning and verdict == Verdict.WARNING:
        raise typer.Exit(WARNING_EXIT_CODE)


@app.command("validate")
def validate(
    scenario: Annotated[
        str,
        typer.Argument(help="Scenario file, or a name under the scenarios directory"),
    ],
) -> None:
    """Validate a scenario file."""
    zoo_scenario = _load_scenario(scenario)
    console.print(
        f"[green]✅ Zoo {escape(zoo_scenario.id)} is valid: "
        f"{len(zoo_scenario.enclosures)} enclosures[/green]"
    )


@app.command("show")
def show(
    scenario: ScenarioArgument = None,
    json_output: JsonOption = False,
) -> None:
    """Show a scenario's enclosures, animals and scripted verdicts."""
    zoo_scenario = _load_scenario(scenario)

    if json_output:
        print(json.dumps(zoo_scenario.model_dump(exclude_none=True), indent=2))
        return

    from zooinspect.cli.display import render_scenario

    console.print(render_scenario(zoo_scenario))
    expected = "WARNING" if zoo_scenario.expected_warning else "OK"
    console.print(f"[dim]Expected zoo verdict: {expected}[/dim]")


if __name__ == "__main__":
    app()
