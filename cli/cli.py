"""Developer CLI for the FitQuest planning core.

Generates weekly plans for stored player records and evaluates the
progression formulas without running the mobile app.
"""

import json
from datetime import date
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fitquest.catalog.loader import load_catalog
from fitquest.config.settings import settings
from fitquest.core.calendar import start_of_week
from fitquest.core.logger import setup_logger
from fitquest.domains.fitness.enums import EquipmentAccess, WorkoutType
from fitquest.domains.fitness.models import PlayerProfile, WeeklyPlan
from fitquest.errors import FitQuestError
from fitquest.persistence.plan_serializers import serialize_plan
from fitquest.persistence.player_record import load_player_record, record_to_profile
from fitquest.plans.equipment import filter_templates
from fitquest.plans.generator import generate_plan
from fitquest.core.rng import SeededRNG, seed_for_day
from fitquest.progression.levels import is_milestone, level_for, progress_for, xp_range_for, xp_to_next_level
from fitquest.progression.pets import essence_for_workout, happiness_xp_multiplier, has_xp_bonus
from fitquest.progression.quests import QuestType, generate_daily_quests
from fitquest.progression.ranks import rank_for
from fitquest.progression.xp import base_xp_for, calculate_total_xp, streak_bonus_description

console = Console()

app = typer.Typer(
    name="fitquest",
    help="FitQuest CLI - weekly plans and progression formulas",
    add_completion=False,
)


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Configure logging before any command runs."""
    setup_logger(level="DEBUG" if debug else settings.log_level, log_file=settings.log_file)


def _parse_date(value: str | None) -> date:
    if value is None:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise typer.BadParameter(f"Expected YYYY-MM-DD, got {value!r}") from e


def _load_profile(profile_path: Path | None) -> PlayerProfile:
    """Read a stored player record (JSON) or fall back to default preferences."""
    if profile_path is None:
        return PlayerProfile()
    data = json.loads(profile_path.read_text(encoding="utf-8"))
    return record_to_profile(load_player_record(data))


def _render_plan(plan: WeeklyPlan, week_start: date) -> None:
    table = Table(title=f"Week of {week_start.isoformat()}", show_lines=True)
    table.add_column("Day", style="cyan", no_wrap=True)
    table.add_column("Theme", style="magenta")
    table.add_column("Exercises")
    table.add_column("XP", justify="right", style="green")

    for day in plan.days:
        if day.is_rest_day:
            table.add_row(day.label, Text(day.theme, style="dim"), "", "")
            continue
        names = "\n".join(exercise.template_name for exercise in day.exercises) or "[dim]no templates available[/dim]"
        xp = sum(exercise.base_xp for exercise in day.exercises)
        table.add_row(day.label, day.theme, names, str(xp))

    console.print(table)
    console.print(f"[bold]{plan.workout_day_count}[/bold] workout days planned")


@app.command()
def plan(
    profile_path: Path | None = typer.Option(None, "--profile", "-p", help="Stored player record (JSON)"),
    on: str | None = typer.Option(None, "--date", "-d", help="Any date in the week to plan (YYYY-MM-DD)"),
    catalog_path: Path | None = typer.Option(None, "--catalog", help="Override the exercise catalog YAML"),
    as_json: bool = typer.Option(False, "--json", help="Print the plan as JSON"),
) -> None:
    """Generate the weekly workout plan for a player."""
    try:
        profile = _load_profile(profile_path)
        catalog = load_catalog(catalog_path)
    except (FitQuestError, OSError, ValueError) as e:
        console.print(Panel(Text(str(e), style="red"), title="Cannot generate plan", border_style="red"))
        raise typer.Exit(1) from e

    week_start = start_of_week(_parse_date(on))
    weekly_plan = generate_plan(profile, catalog.templates, week_start, requirements=catalog.equipment)

    if as_json:
        console.print(JSON(json.dumps(serialize_plan(weekly_plan))))
        return

    _render_plan(weekly_plan, week_start)


@app.command()
def templates(
    equipment: list[EquipmentAccess] = typer.Option([], "--equipment", "-e", help="Equipment filter (repeatable)"),
    catalog_path: Path | None = typer.Option(None, "--catalog", help="Override the exercise catalog YAML"),
) -> None:
    """List catalog templates usable with the given equipment."""
    try:
        catalog = load_catalog(catalog_path)
    except FitQuestError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e

    available = filter_templates(catalog.templates, equipment, catalog.equipment)

    table = Table(title=f"{len(available)} templates")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Muscle group")
    table.add_column("Base XP", justify="right", style="green")
    for template in available:
        table.add_row(
            template.name,
            template.workout_type.display_name,
            template.muscle_group.display_name if template.muscle_group else "-",
            str(template.base_xp),
        )
    console.print(table)


@app.command()
def level(
    xp: int = typer.Argument(..., min=0, help="Total XP"),
) -> None:
    """Show the level and progress for a total XP value."""
    current = level_for(xp)
    xp_range = xp_range_for(current)
    milestone = " [yellow](milestone)[/yellow]" if is_milestone(current) else ""
    rank = rank_for(current)

    console.print(f"Level [bold]{current}[/bold]{milestone}")
    console.print(f"Rank: {rank.display_name} ({rank.level_range})")
    console.print(f"Progress: {progress_for(xp):.0%} ({xp - xp_range.start}/{xp_range.end - xp_range.start} XP)")
    console.print(f"XP to next level: {xp_to_next_level(xp)}")


@app.command()
def xp(
    name: str = typer.Argument(..., help="Template name (unknown names use the custom base XP)"),
    workout_type: WorkoutType = typer.Option(WorkoutType.STRENGTH, "--type", "-t", help="Workout type"),
    streak: int = typer.Option(0, "--streak", min=0, help="Current daily streak"),
    first_of_day: bool = typer.Option(True, "--first/--not-first", help="First workout of the day"),
    weight: float | None = typer.Option(None, "--weight", help="Strength weight"),
    reps: int | None = typer.Option(None, "--reps", help="Strength reps per set"),
    sets: int | None = typer.Option(None, "--sets", help="Strength sets"),
    duration: int | None = typer.Option(None, "--duration", help="Cardio duration in minutes"),
    calories: int | None = typer.Option(None, "--calories", help="Cardio calories"),
    happiness: float | None = typer.Option(None, "--happiness", min=0, max=100, help="Pet happiness (0-100)"),
    catalog_path: Path | None = typer.Option(None, "--catalog", help="Override the exercise catalog YAML"),
) -> None:
    """Compute the XP awarded for a logged workout."""
    try:
        catalog = load_catalog(catalog_path)
    except FitQuestError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e

    total = calculate_total_xp(
        base_xp=base_xp_for(name, catalog.templates),
        workout_type=workout_type,
        streak=streak,
        is_first_workout_of_day=first_of_day,
        weight=weight,
        reps=reps,
        sets=sets,
        duration_minutes=duration,
        calories=calories,
    )
    logger.debug(f"XP for {name}: {total}")

    console.print(f"[bold green]+{total} XP[/bold green]")
    console.print(f"+{essence_for_workout(total)} essence")
    bonus = streak_bonus_description(streak)
    if bonus:
        console.print(f"[yellow]{bonus}[/yellow]")
    if happiness is not None and has_xp_bonus(happiness):
        console.print(f"[magenta]Happy pet bonus: x{happiness_xp_multiplier(happiness):.2f} pet XP[/magenta]")


@app.command()
def quests(
    on: str | None = typer.Option(None, "--date", "-d", help="Day to draw quests for (YYYY-MM-DD)"),
    exclude: list[QuestType] = typer.Option([], "--exclude", "-x", help="Quest types to skip (repeatable)"),
) -> None:
    """Show the daily quests drawn for a day."""
    day = _parse_date(on)
    picked = generate_daily_quests(SeededRNG(seed_for_day(day)), excluding=exclude)

    table = Table(title=f"Daily quests {day.isoformat()}")
    table.add_column("Quest", style="cyan")
    table.add_column("Task")
    table.add_column("Difficulty")
    table.add_column("Reward", justify="right", style="green")
    for quest in picked:
        definition = quest.definition
        table.add_row(
            definition.display_name,
            definition.description,
            definition.difficulty.name.lower(),
            f"{definition.reward_amount} {definition.reward_type.value}",
        )
    console.print(table)
