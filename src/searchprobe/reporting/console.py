"""Rich-powered console output."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from searchprobe.models import RunSummary, ScenarioResult
from searchprobe.scenarios.suite import Scenario

_console = Console()

_OUTCOME_STYLES = {
    "passed": "bold green",
    "failed": "bold red",
    "error": "bold magenta",
}


def print_banner() -> None:
    """Display the startup banner."""
    _console.print(
        Panel.fit(
            "[bold cyan]SearchProbe[/bold cyan]  Search page UI checks",
            border_style="cyan",
        )
    )


def print_progress(result: ScenarioResult, index: int) -> None:
    """Print a single scenario result line."""
    style = _OUTCOME_STYLES.get(result.outcome, "")
    line = (
        f"  [{style}]{index:>3}[/{style}]  "
        f"[{style}]{result.outcome:<7}[/{style}]  "
        f"{result.name:<20}  {result.duration_ms:>6} ms"
    )
    if result.failure_reason:
        line += f"  [dim]{result.failure_reason}[/dim]"
    _console.print(line, highlight=False)


def print_scenario_list(scenarios: list[Scenario]) -> None:
    table = Table(title="Scenarios", show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for sc in scenarios:
        table.add_row(sc.name, sc.description)
    _console.print(table)


def print_run_report(summary: RunSummary) -> None:
    """Display a run summary table."""
    table = Table(title="Run Report", show_header=True, header_style="bold magenta")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Scenarios", str(len(summary.results)))
    table.add_row("Passed", str(summary.total_passed))
    table.add_row("Failed", str(summary.total_failed))
    table.add_row("Errors", str(summary.total_errors))
    table.add_row("Run ID", summary.run_id)
    table.add_row("Started", summary.started_at)
    table.add_row("Ended", summary.ended_at or "-")

    _console.print()
    _console.print(table)

    screenshots = [r for r in summary.results if r.screenshot_path]
    for r in screenshots:
        _console.print(f"  [dim]screenshot[/dim] {r.name}: {r.screenshot_path}")
    _console.print()
