"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional
from uuid import UUID

import typer
from sqlmodel import Session

from sleeppdf.config import Settings, load_config
from sleeppdf.core.pipeline import export_filename, render_markdown, run_export
from sleeppdf.crud.database import init_db, make_engine, reset_db
from sleeppdf.crud.models import SubscriptionTier, User
from sleeppdf.crud.plans import create_plan, list_plans
from sleeppdf.crud.users import access_summary, create_user, get_user_by_email, set_tier


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _engine(settings: Settings):
    engine = make_engine(settings.db_url)
    init_db(engine)
    return engine


def _user(session: Session, email: str) -> User:
    user = get_user_by_email(session, email)
    if user is None:
        _fail(f"User not found: {email}")
    return user


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        _fail(f"Cannot read {path}", e)


def _write_pdf(path: Path, pdf: bytes) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(pdf)
    except OSError as e:
        _fail(f"Cannot write {path}", e)


def init_cmd(
    reset: Annotated[bool, typer.Option("--reset", help="Drop and recreate all tables")] = False,
    ):
    """Initialize database schema. Use --reset to clear existing data."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    if reset:
        reset_db(engine)
        typer.echo("Existing data cleared.")
    else:
        init_db(engine)
    typer.echo(f"Database initialized at: {settings.db_url}")


def add_user_cmd(
    email: Annotated[str, typer.Argument(help="Account email address")],
    ):
    """Register a free-tier user."""
    settings = _settings()
    with Session(_engine(settings)) as session:
        try:
            user = create_user(session, email)
        except ValueError as e:
            _fail(str(e))
        session.commit()
        typer.echo(f"Created user {user.email} ({user.id})")


def set_tier_cmd(
    email: Annotated[str, typer.Argument(help="Account email address")],
    tier: Annotated[SubscriptionTier, typer.Argument(help="free, basic or premium")],
    ):
    """Assign a subscription tier and reset the user's export credits to its allowance."""
    settings = _settings()
    credits = {
        SubscriptionTier.free: 0,
        SubscriptionTier.basic: settings.basic_export_credits,
        SubscriptionTier.premium: settings.premium_export_credits,
    }[tier]
    with Session(_engine(settings)) as session:
        user = set_tier(session, _user(session, email), tier, credits)
        session.commit()
        typer.echo(f"{user.email}: {user.subscription_tier.value} tier, {user.export_credits} export credit(s)")


def status_cmd(
    email: Annotated[str, typer.Argument(help="Account email address")],
    ):
    """Show subscription tier and remaining export credits."""
    settings = _settings()
    with Session(_engine(settings)) as session:
        summary = access_summary(_user(session, email))
    typer.echo(f"tier: {summary['tier']}")
    typer.echo(f"active: {'yes' if summary['active'] else 'no'}")
    typer.echo(f"export credits: {summary['export_credits']}")


def add_plan_cmd(
    email: Annotated[str, typer.Argument(help="Account email address")],
    path: Annotated[Path, typer.Argument(help="Markdown schedule file")],
    age: Annotated[Optional[int], typer.Option("--age", min=0, help="Baby age in months (used for the PDF title)")] = None,
    ):
    """Save a markdown schedule as a plan for the user."""
    settings = _settings()
    markdown = _read(path)
    with Session(_engine(settings)) as session:
        plan = create_plan(session, _user(session, email), markdown, age)
        session.commit()
        typer.echo(f"Saved plan {plan.id}")


def list_plans_cmd(
    email: Annotated[str, typer.Argument(help="Account email address")],
    ):
    """List the user's saved plans, newest first."""
    settings = _settings()
    with Session(_engine(settings)) as session:
        plans = list_plans(session, _user(session, email))
        if not plans:
            typer.echo("No plans found.")
            raise typer.Exit(1)
        for p in plans:
            age = f"{p.baby_age_months} mo" if p.baby_age_months else "-"
            typer.echo(f"{p.id}  {p.created_at:%Y-%m-%d %H:%M}  {age}")


def export_cmd(
    email: Annotated[str, typer.Argument(help="Account email address")],
    plan_id: Annotated[Optional[UUID], typer.Option("--plan", help="Saved plan id to export (not with --file)")] = None,
    path: Annotated[Optional[Path], typer.Option("--file", help="Markdown schedule file to export (not with --plan)")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    ):
    """Export a saved plan or a markdown file to PDF, charging an export credit."""
    if plan_id and path:
        _fail("Use either --plan or --file, not both")
    settings = _settings(overrides={"output_dir": out})
    markdown = _read(path) if path else None
    engine = _engine(settings)

    # The credit is committed only after the PDF is on disk.
    try:
        with Session(engine) as session:
            user = _user(session, email)
            title, pdf = run_export(session, user, plan_id, markdown, settings.default_title)
            out_file = Path(settings.output_dir) / export_filename(title)
            _write_pdf(out_file, pdf)
            session.commit()
            remaining = user.export_credits
            tier = user.subscription_tier
    except typer.Exit:
        raise
    except (LookupError, PermissionError, ValueError) as e:
        _fail(str(e))
    except Exception as e:
        _fail("Export failed", e)

    typer.echo(f"  {title} -> {out_file}")
    if tier == SubscriptionTier.basic:
        typer.echo(f"{remaining} export credit(s) left")


def render_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown schedule file")],
    title: Annotated[Optional[str], typer.Option("--title", help="Document title")] = None,
    out: Annotated[Optional[Path], typer.Option("--out", help="Output PDF path")] = None,
    ):
    """Render a markdown file to PDF directly, without accounts or credits."""
    settings = _settings()
    title = title or settings.default_title
    markdown = _read(path)
    try:
        pdf = render_markdown(markdown, title)
    except Exception as e:
        _fail("Render failed", e)
    out_file = out or Path(settings.output_dir) / export_filename(title)
    _write_pdf(out_file, pdf)
    typer.echo(f"  {path} -> {out_file}")
