"""
Study Planner CLI - adaptive daily study-time allocation.

One-shot commands read the plan file, apply one operation and write it back:

Usage:
    planner add Math 9 10 --perf 80     # Register a subject
    planner remove Math                 # Drop a subject
    planner list                        # Show subjects
    planner generate --hours 5          # Compute a fresh schedule
    planner show                        # Show the stored schedule
    planner record Math 65              # Record a performance score
    planner set-score Math 75           # Override a score (no history)
    planner adjust                      # Adaptive rebalance
    planner demo                        # Write the demo subject set
    planner menu                        # Interactive session

The plan file defaults to PLANNER_DATA_FILE (study_plan.csv).
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import FloatPrompt, IntPrompt, Prompt
from rich.table import Table

sys.path.insert(0, str(Path(__file__).parent.parent.parent))
from config import get_settings
from src.planner import (
    PlannerError,
    Schedule,
    StudyPlanner,
    seed_demo_subjects,
)
from src.planner.subject import round_hours

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="planner",
    help="Smart study planner - adaptive daily study-time allocation",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

FileOption = Annotated[
    Optional[Path], typer.Option("--file", "-f", help="Plan CSV file (default: PLANNER_DATA_FILE)")
]
HoursOption = Annotated[
    Optional[float], typer.Option("--hours", "-H", min=0.0, help="Total daily study hours")
]


def _plan_path(file: Optional[Path]) -> Path:
    return file or get_settings().data_file


def _open_planner(file: Optional[Path], hours: Optional[float] = None) -> StudyPlanner:
    """Build a planner from settings and load the plan file if it exists."""
    settings = get_settings()
    planner = StudyPlanner.from_settings(settings)
    if hours is not None:
        planner.total_daily_hours = hours
    path = _plan_path(file)
    if path.exists():
        planner.load(path)
    else:
        logger.debug(f"No plan file at {path}; starting empty")
    return planner


def _fail(err: PlannerError) -> None:
    console.print(f"[red]Error:[/red] {err}")
    raise typer.Exit(code=1)


def _subjects_table(planner: StudyPlanner) -> Table:
    table = Table(title="[bold]Subjects[/bold]", box=box.ROUNDED)
    table.add_column("Subject", style="cyan")
    table.add_column("Difficulty", justify="right")
    table.add_column("Importance", justify="right")
    table.add_column("Performance", justify="right")
    table.add_column("Hours", justify="right")

    for subject in planner.subjects:
        perf = subject.performance_score
        perf_style = "green" if perf >= 90 else ("yellow" if perf >= 70 else "red")
        table.add_row(
            subject.name,
            str(subject.difficulty),
            str(subject.importance),
            f"[{perf_style}]{perf:.1f}[/{perf_style}]",
            f"{subject.allocated_hours:.2f}",
        )
    return table


def _print_subjects(planner: StudyPlanner) -> None:
    if not len(planner):
        console.print("[yellow](No subjects available)[/yellow]")
        return
    console.print(_subjects_table(planner))


def _print_schedule(schedule: Schedule, title: str = "Schedule") -> None:
    if not len(schedule):
        console.print("[yellow]Schedule is empty - add subjects first.[/yellow]")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("Subject", style="cyan")
    table.add_column("Hours", justify="right", style="bold")
    for name, hours in schedule.items():
        table.add_row(name, f"{hours:.2f}")

    console.print(
        Panel(
            table,
            title=f"[bold]{title}[/bold]",
            subtitle=f"total {schedule.total_hours:.2f} hrs",
            border_style="blue",
        )
    )


# =============================================================================
# Subject Commands
# =============================================================================


@app.command()
def add(
    name: Annotated[str, typer.Argument(help="Subject name")],
    difficulty: Annotated[int, typer.Argument(min=1, max=10, help="Difficulty 1-10")],
    importance: Annotated[int, typer.Argument(min=1, max=10, help="Importance 1-10")],
    perf: Annotated[
        Optional[float], typer.Option("--perf", "-p", min=0.0, max=100.0, help="Initial performance 0-100")
    ] = None,
    file: FileOption = None,
) -> None:
    """Add a subject to the plan."""
    try:
        planner = _open_planner(file)
        subject = planner.add_subject(name, difficulty, importance, perf)
        planner.save(_plan_path(file))
    except PlannerError as e:
        _fail(e)
    console.print(f"[green][OK][/green] Added {subject.name}")


@app.command()
def remove(
    name: Annotated[str, typer.Argument(help="Subject name")],
    file: FileOption = None,
) -> None:
    """Remove a subject (no-op if absent)."""
    try:
        planner = _open_planner(file)
        removed = planner.remove_subject(name)
        planner.save(_plan_path(file))
    except PlannerError as e:
        _fail(e)
    if removed:
        console.print(f"[green][OK][/green] Removed {name}")
    else:
        console.print(f"[dim]{name} was not in the plan[/dim]")


@app.command("list")
def list_subjects(file: FileOption = None) -> None:
    """List subjects with their scores and hours."""
    try:
        planner = _open_planner(file)
    except PlannerError as e:
        _fail(e)
    _print_subjects(planner)


@app.command()
def record(
    name: Annotated[str, typer.Argument(help="Subject name")],
    score: Annotated[float, typer.Argument(min=0.0, max=100.0, help="Score 0-100")],
    file: FileOption = None,
) -> None:
    """Record a performance score for a subject."""
    try:
        planner = _open_planner(file)
        updated = planner.record_performance(name, score)
        planner.save(_plan_path(file))
    except PlannerError as e:
        _fail(e)
    console.print(f"[green][OK][/green] {name} performance now {updated:.1f}")


@app.command("set-score")
def set_score(
    name: Annotated[str, typer.Argument(help="Subject name")],
    score: Annotated[float, typer.Argument(min=0.0, max=100.0, help="Score 0-100")],
    file: FileOption = None,
) -> None:
    """Override a subject's performance score without recording history."""
    try:
        planner = _open_planner(file)
        planner.set_performance(name, score)
        planner.save(_plan_path(file))
    except PlannerError as e:
        _fail(e)
    console.print(f"[green][OK][/green] {name} performance set to {score:.1f}")


# =============================================================================
# Schedule Commands
# =============================================================================


@app.command()
def generate(hours: HoursOption = None, file: FileOption = None) -> None:
    """Generate a fresh schedule from subject weights."""
    try:
        planner = _open_planner(file, hours)
        schedule = planner.generate_schedule()
        planner.save(_plan_path(file))
    except PlannerError as e:
        _fail(e)
    _print_schedule(schedule, "Generated Schedule")


@app.command()
def show(file: FileOption = None) -> None:
    """Show the currently stored schedule."""
    try:
        planner = _open_planner(file)
    except PlannerError as e:
        _fail(e)
    _print_schedule(planner.current_schedule(), "Current Schedule")


@app.command()
def adjust(
    hours: HoursOption = None,
    low: Annotated[Optional[float], typer.Option("--low", help="Boost below this score")] = None,
    high: Annotated[Optional[float], typer.Option("--high", help="Reduce above this score")] = None,
    boost: Annotated[Optional[float], typer.Option("--boost", help="Boost multiplier")] = None,
    reduce: Annotated[Optional[float], typer.Option("--reduce", help="Reduce multiplier")] = None,
    file: FileOption = None,
) -> None:
    """Rebalance current allocations toward weak subjects."""
    config = get_settings().adjustment_config()
    if low is not None:
        config.low_threshold = low
    if high is not None:
        config.high_threshold = high
    if boost is not None:
        config.boost_factor = boost
    if reduce is not None:
        config.reduce_factor = reduce

    try:
        planner = _open_planner(file, hours)
        if hours is None:
            # Keep the budget the stored schedule was generated for
            stored = planner.current_schedule().total_hours
            if stored > 0:
                planner.total_daily_hours = round_hours(stored)
        schedule = planner.adaptive_adjust(config)
        planner.save(_plan_path(file))
    except PlannerError as e:
        _fail(e)
    _print_schedule(schedule, "Adjusted Schedule")


@app.command()
def demo(file: FileOption = None) -> None:
    """Write the demo subjects (Math, Physics, History, English) to the plan."""
    try:
        planner = _open_planner(file)
        seed_demo_subjects(planner)
        planner.save(_plan_path(file))
    except PlannerError as e:
        _fail(e)
    _print_subjects(planner)


# =============================================================================
# Interactive Menu
# =============================================================================

MENU_OPTIONS = [
    ("1", "Add subject"),
    ("2", "Remove subject"),
    ("3", "List subjects"),
    ("4", "Set total daily hours"),
    ("5", "Generate schedule"),
    ("6", "Show current schedule"),
    ("7", "Record performance"),
    ("8", "Adaptive adjustment"),
    ("9", "Save to file"),
    ("10", "Load from file"),
    ("0", "Exit"),
]


def _ask_int(prompt: str, low: int, high: int) -> int:
    while True:
        value = IntPrompt.ask(prompt)
        if low <= value <= high:
            return value
        console.print(f"[yellow]Enter a value between {low} and {high}[/yellow]")


def _ask_float(prompt: str, low: float, high: float) -> float:
    while True:
        value = FloatPrompt.ask(prompt)
        if low <= value <= high:
            return value
        console.print(f"[yellow]Enter a value between {low:g} and {high:g}[/yellow]")


def _run_menu_choice(planner: StudyPlanner, choice: str, default_file: Path) -> None:
    if choice == "1":
        name = Prompt.ask("Subject name")
        difficulty = _ask_int("Difficulty (1-10)", 1, 10)
        importance = _ask_int("Importance (1-10)", 1, 10)
        perf = _ask_float("Initial performance (0-100)", 0.0, 100.0)
        planner.add_subject(name, difficulty, importance, perf)
    elif choice == "2":
        planner.remove_subject(Prompt.ask("Subject name to remove"))
    elif choice == "3":
        _print_subjects(planner)
    elif choice == "4":
        planner.total_daily_hours = _ask_float("Total study hours per day", 0.0, 24.0)
    elif choice == "5":
        _print_schedule(planner.generate_schedule(), "Generated Schedule")
    elif choice == "6":
        _print_schedule(planner.current_schedule(), "Current Schedule")
    elif choice == "7":
        name = Prompt.ask("Subject name")
        score = _ask_float("Score (0-100)", 0.0, 100.0)
        planner.record_performance(name, score)
    elif choice == "8":
        _print_schedule(
            planner.adaptive_adjust(get_settings().adjustment_config()), "Adjusted Schedule"
        )
    elif choice == "9":
        path = Path(Prompt.ask("Save filename", default=str(default_file)))
        planner.save(path)
        console.print(f"[green][OK][/green] Saved to {path}")
    elif choice == "10":
        path = Path(Prompt.ask("Load filename", default=str(default_file)))
        planner.load(path)
        console.print(f"[green][OK][/green] Loaded {len(planner)} subjects")


@app.command()
def menu(
    demo_subjects: Annotated[
        bool, typer.Option("--demo", help="Start with the demo subjects")
    ] = False,
    file: FileOption = None,
) -> None:
    """Interactive session; state lives in memory until saved."""
    planner = StudyPlanner.from_settings(get_settings())
    if demo_subjects:
        seed_demo_subjects(planner)

    console.print(Panel("[bold]SMART STUDY PLANNER[/bold]", border_style="cyan"))

    while True:
        console.print("\n[bold cyan]MENU[/bold cyan]")
        for key, label in MENU_OPTIONS:
            console.print(f"  [cyan]{key:>2}[/cyan] - {label}")

        choice = Prompt.ask(
            ">_ [cyan]CHOICE[/cyan]",
            choices=[key for key, _ in MENU_OPTIONS],
            show_choices=False,
        )
        if choice == "0":
            break
        try:
            _run_menu_choice(planner, choice, _plan_path(file))
        except PlannerError as e:
            console.print(f"[red]Error:[/red] {e}")

    console.print("Goodbye!")


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """CLI entry point."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=get_settings().log_level,
        format="<level>{message}</level>",
    )

    app()


if __name__ == "__main__":
    main()
