"""
adapters.cli.main - CLI adapter for GitFit.

Mirrors gitfit.adapters.rest but for terminal use. Uses the same
ServiceFactory and services as the REST API so all behaviour (auth,
tracking, profiles) is identical.

Commands
--------
  register     Create a new account
  login        Sign in and save credentials locally (~/.gitfit/session.json)
  logout       Clear stored credentials
  whoami       Show the currently logged-in user
  profile      Show your current fitness profile and goals
  set-goals    Save a new profile snapshot
  log-food     Log a food entry for today
  foods        List food entries (lifetime or a date range)
  remove-food  Delete one of your food entries
  water        Log an 8 oz. cup of water
  water-count  Show cups of water for a day
  summary      Daily totals against your goals

Usage
-----
  python run_cli.py login
  python run_cli.py log-food "Oatmeal" --calories 150 --carbs 27 --meal breakfast
  python run_cli.py summary
"""

from __future__ import annotations

import asyncio
from datetime import date, datetime
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm
from rich.table import Table

from gitfit import __version__
from gitfit.adapters.cli.session import Session, clear_session, load_session, save_session
from gitfit.application.context import SessionContext
from gitfit.application.dto import LoginRequest, RegisterRequest
from gitfit.domain.entities import FoodEntry, Profile
from gitfit.domain.exceptions import (
    AuthenticationError,
    DuplicateLoginError,
    EntryNotFoundError,
    InvalidDateRangeError,
)
from gitfit.factory import ServiceFactory
from gitfit.infrastructure.config import Settings

console = Console()
app = typer.Typer(
    help="GitFit food and water tracker",
    add_completion=False,
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _require_session() -> Session:
    """Return the stored session or exit with a user-friendly error."""
    session = load_session()
    if session is None:
        console.print(
            "[bold red]Not logged in.[/bold red] "
            "Run [bold]login[/bold] (or [bold]register[/bold]) first."
        )
        raise typer.Exit(code=1)
    return session


async def _make_factory() -> ServiceFactory:
    factory = ServiceFactory(Settings.from_env())
    await factory.initialize()
    return factory


def _build_ctx(session: Session, factory: ServiceFactory) -> SessionContext:
    """Context decoded from the stored token.

    The token's claims, not the session file, decide who the caller is.
    """
    try:
        return factory.create_authentication_service().open_session(session.access_token)
    except AuthenticationError:
        console.print("[bold red]Session expired.[/bold red] Run [bold]login[/bold] again.")
        raise typer.Exit(code=1)


def _parse_date(value: Optional[str], option: str) -> Optional[date]:
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got '{value}'", param_hint=option)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"gitfit v{__version__}")
        raise typer.Exit()


# ---------------------------------------------------------------------------
# Commands: Auth
# ---------------------------------------------------------------------------

@app.command()
def register(
    login_name: str = typer.Option(..., "--login", prompt="Username (min 3 chars)"),
    password: str = typer.Option(..., prompt="Password (min 6 chars)", hide_input=True),
    first_name: str = typer.Option("", "--first-name"),
    last_name: str = typer.Option("", "--last-name"),
) -> None:
    """Create a new account."""
    if len(login_name) < 3 or len(password) < 6:
        console.print("[bold red]Username needs 3+ characters and password 6+.[/bold red]")
        raise typer.Exit(code=1)

    async def _run() -> None:
        factory = await _make_factory()
        auth_svc = factory.create_authentication_service()
        try:
            token = await auth_svc.register(RegisterRequest(
                login=login_name,
                password=password,
                first_name=first_name,
                last_name=last_name,
            ))
        except DuplicateLoginError:
            console.print(f"[bold red]Username '{login_name}' is already taken.[/bold red]")
            raise typer.Exit(code=1)

        save_session(Session(
            user_id=token.user_id,
            access_token=token.access_token,
            login=login_name,
        ))
        console.print(Panel(
            f"[bold green]Account created and logged in![/bold green]\n"
            f"Welcome, [bold]{login_name}[/bold] (user_id={token.user_id}).",
            border_style="green",
        ))

    asyncio.run(_run())


@app.command()
def login(
    login_name: str = typer.Option(..., "--login", prompt="Username"),
    password: str = typer.Option(..., prompt="Password", hide_input=True),
) -> None:
    """Sign in to your account."""

    async def _run() -> None:
        factory = await _make_factory()
        auth_svc = factory.create_authentication_service()
        try:
            token = await auth_svc.login(LoginRequest(login=login_name, password=password))
        except AuthenticationError:
            console.print(
                "[bold red]Login failed.[/bold red] "
                "Check your username and password."
            )
            raise typer.Exit(code=1)

        save_session(Session(
            user_id=token.user_id,
            access_token=token.access_token,
            login=login_name,
        ))
        console.print(f"[bold green]Logged in![/bold green] Welcome back, [bold]{login_name}[/bold].")

    asyncio.run(_run())


@app.command()
def logout(
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation."),
) -> None:
    """Sign out and clear stored credentials."""
    session = load_session()
    if session is None:
        console.print("[dim]Not currently logged in.[/dim]")
        return
    label = session.login or f"user #{session.user_id}"
    if yes or Confirm.ask(f"Sign out [bold]{label}[/bold]?"):
        clear_session()
        console.print("[green]Logged out.[/green]")


@app.command()
def whoami() -> None:
    """Show the currently logged-in user."""
    session = load_session()
    if session is None:
        console.print("[dim]Not logged in.[/dim]")
        return
    console.print(
        f"Logged in as [bold]{session.login or '?'}[/bold] "
        f"(user_id={session.user_id})"
    )


# ---------------------------------------------------------------------------
# Commands: Profile
# ---------------------------------------------------------------------------

@app.command()
def profile() -> None:
    """Show your current fitness profile and goals."""
    session = _require_session()

    async def _run() -> None:
        factory = await _make_factory()
        ctx = _build_ctx(session, factory)
        current = await factory.create_profile_service().get_current_profile(ctx)

        t = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
        t.add_column("Field", style="bold")
        t.add_column("Value")
        if current.height_in:
            t.add_row("Height (in)", f"{current.height_in:g}")
        if current.current_weight:
            t.add_row("Weight", f"{current.current_weight:g}")
        if current.goal_weight:
            t.add_row("Goal weight", f"{current.goal_weight:g}")
        if current.activity_level:
            t.add_row("Activity", current.activity_level)
        t.add_row("Calorie goal", str(current.daily_calorie_goal))
        t.add_row("Water goal", f"{current.daily_water_goal} cups")
        console.print(Panel(t, title="Your Profile", border_style="blue"))

    asyncio.run(_run())


@app.command("set-goals")
def set_goals(
    calories: int = typer.Option(2000, "--calories", min=1, help="Daily calorie goal."),
    water: int = typer.Option(8, "--water", min=0, help="Daily water goal in 8 oz. cups."),
    weight: float = typer.Option(0.0, "--weight", min=0),
    goal_weight: float = typer.Option(0.0, "--goal-weight", min=0),
    height: float = typer.Option(0.0, "--height", min=0, help="Height in inches."),
    activity: str = typer.Option("", "--activity"),
) -> None:
    """Save a new profile snapshot."""
    session = _require_session()

    async def _run() -> None:
        factory = await _make_factory()
        ctx = _build_ctx(session, factory)
        await factory.create_profile_service().save_profile(ctx, Profile(
            height_in=height,
            current_weight=weight,
            goal_weight=goal_weight,
            activity_level=activity,
            daily_calorie_goal=calories,
            daily_water_goal=water,
        ))
        console.print(f"[green]Goals saved:[/green] {calories} kcal, {water} cups of water.")

    asyncio.run(_run())


# ---------------------------------------------------------------------------
# Commands: Tracking
# ---------------------------------------------------------------------------

@app.command("log-food")
def log_food(
    name: str = typer.Argument(..., help="What you ate."),
    calories: float = typer.Option(..., "--calories", min=0),
    fat: float = typer.Option(0.0, "--fat", min=0),
    protein: float = typer.Option(0.0, "--protein", min=0),
    carbs: float = typer.Option(0.0, "--carbs", min=0),
    meal: str = typer.Option("", "--meal", help="breakfast, lunch, dinner or snack"),
    servings: float = typer.Option(1.0, "--servings", min=0.01),
    ndbno: str = typer.Option("", "--ndbno", help="USDA nutrient database number"),
) -> None:
    """Log a food entry for today."""
    session = _require_session()

    async def _run() -> None:
        factory = await _make_factory()
        ctx = _build_ctx(session, factory)
        entry_id = await factory.create_tracking_service().log_food(ctx, FoodEntry(
            name=name,
            calories=calories,
            fat=fat,
            protein=protein,
            carbohydrates=carbs,
            meal_type=meal,
            servings=servings,
            ndbno=ndbno,
        ))
        console.print(f"[green]Logged[/green] {name} (entry #{entry_id}).")

    asyncio.run(_run())


@app.command()
def foods(
    start: Optional[str] = typer.Option(None, "--start", help="YYYY-MM-DD"),
    finish: Optional[str] = typer.Option(None, "--finish", help="YYYY-MM-DD"),
) -> None:
    """List your food entries, optionally within [start, finish]."""
    session = _require_session()
    start_date = _parse_date(start, "--start")
    finish_date = _parse_date(finish, "--finish")

    async def _run() -> None:
        factory = await _make_factory()
        ctx = _build_ctx(session, factory)
        try:
            entries = await factory.create_tracking_service().list_food(ctx, start_date, finish_date)
        except InvalidDateRangeError as exc:
            console.print(f"[bold red]{exc}[/bold red]")
            raise typer.Exit(code=1)

        if not entries:
            console.print("[dim]No food entries.[/dim]")
            return

        t = Table(box=box.SIMPLE)
        for col in ("ID", "Date", "Meal", "Food", "Servings", "kcal", "Fat", "Protein", "Carbs"):
            t.add_column(col)
        for e in entries:
            t.add_row(
                str(e.id), e.date.isoformat() if e.date else "", e.meal_type, e.name,
                f"{e.servings:g}", f"{e.calories:g}", f"{e.fat:g}",
                f"{e.protein:g}", f"{e.carbohydrates:g}",
            )
        console.print(t)

    asyncio.run(_run())


@app.command("remove-food")
def remove_food(entry_id: int = typer.Argument(..., help="Entry id from `foods`.")) -> None:
    """Delete one of your food entries."""
    session = _require_session()

    async def _run() -> None:
        factory = await _make_factory()
        ctx = _build_ctx(session, factory)
        try:
            await factory.create_tracking_service().remove_food(ctx, entry_id)
        except EntryNotFoundError:
            console.print(f"[bold red]No food entry #{entry_id}.[/bold red]")
            raise typer.Exit(code=1)
        console.print(f"[green]Removed entry #{entry_id}.[/green]")

    asyncio.run(_run())


@app.command()
def water() -> None:
    """Log an 8 oz. cup of water."""
    session = _require_session()

    async def _run() -> None:
        factory = await _make_factory()
        ctx = _build_ctx(session, factory)
        service = factory.create_tracking_service()
        await service.log_water(ctx)
        cups = await service.water_count(ctx, factory.today())
        console.print(f"[green]Cup logged.[/green] {cups} today.")

    asyncio.run(_run())


@app.command("water-count")
def water_count(day: Optional[str] = typer.Option(None, "--date", help="YYYY-MM-DD")) -> None:
    """Show cups of water for a day (defaults to today)."""
    session = _require_session()
    query_date = _parse_date(day, "--date")

    async def _run() -> None:
        factory = await _make_factory()
        ctx = _build_ctx(session, factory)
        target = query_date or factory.today()
        cups = await factory.create_tracking_service().water_count(ctx, target)
        console.print(f"{target.isoformat()}: {cups} cups")

    asyncio.run(_run())


@app.command()
def summary(day: Optional[str] = typer.Option(None, "--date", help="YYYY-MM-DD")) -> None:
    """Daily totals against your goals."""
    session = _require_session()
    query_date = _parse_date(day, "--date")

    async def _run() -> None:
        factory = await _make_factory()
        ctx = _build_ctx(session, factory)
        result = await factory.create_tracking_service().daily_summary(
            ctx, query_date or factory.today(),
        )

        t = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
        t.add_column("Field", style="bold")
        t.add_column("Value")
        t.add_row("Calories", f"{result.totals.calories:g} / {result.calorie_goal}")
        t.add_row("Fat", f"{result.totals.fat:g} g")
        t.add_row("Protein", f"{result.totals.protein:g} g")
        t.add_row("Carbs", f"{result.totals.carbohydrates:g} g")
        t.add_row("Water", f"{result.water_cups} / {result.water_goal} cups")
        t.add_row("Entries", str(result.entry_count))
        console.print(Panel(t, title=f"Summary for {result.day.isoformat()}", border_style="cyan"))

    asyncio.run(_run())


# ---------------------------------------------------------------------------
# Global version option
# ---------------------------------------------------------------------------

@app.callback()
def _callback(
    version: bool = typer.Option(
        False, "--version", "-v",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """GitFit food and water tracker"""


if __name__ == "__main__":
    app()
