"""Pipeline step functions: markdown rendering and the credit-checked export service"""

import logging
from io import BytesIO
from uuid import UUID

from sqlmodel import Session

from sleeppdf.core.classify import classify_lines
from sleeppdf.core.layout import PageLayout
from sleeppdf.core.render import PageWriter, render_section
from sleeppdf.core.sections import group_sections
from sleeppdf.core.utils.slug import slugify
from sleeppdf.crud.models import User
from sleeppdf.crud.plans import get_plan
from sleeppdf.crud.users import check_export_access, consume_export_credit


logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Sleep Schedule"
PDF_CONTENT_TYPE = "application/pdf"


def schedule_title(baby_age_months: int | None, default: str = DEFAULT_TITLE) -> str:
    """Return '<n>-Month-Old Sleep Schedule' for a positive age, else the default title."""
    if baby_age_months and baby_age_months > 0:
        return f"{baby_age_months}-Month-Old Sleep Schedule"
    return default


def export_filename(title: str) -> str:
    return f"{slugify(title) or 'sleep-schedule'}.pdf"


def render_markdown(markdown: str, title: str, layout: PageLayout | None = None) -> bytes:
    """Render schedule markdown to PDF bytes: title, then one block per section, then page numbers."""
    buffer = BytesIO()
    writer = PageWriter.open(buffer, layout or PageLayout())
    writer.draw_title(title)

    sections = 0
    for section in group_sections(classify_lines(markdown, title)):
        render_section(writer, section)
        sections += 1

    writer.finish()
    logger.debug("rendered %d section(s) on %d page(s)", sections, writer.page_count)
    return buffer.getvalue()


def run_export(
    session: Session,
    user: User,
    plan_id: UUID | None = None,
    markdown: str | None = None,
    default_title: str = DEFAULT_TITLE,
    layout: PageLayout | None = None,
    ) -> tuple[str, bytes]:
    """Resolve the schedule source, enforce export entitlement, render, and charge a credit.

    A saved plan (which must belong to user) takes precedence over inline markdown.
    Raises LookupError for a missing plan, ValueError when there is nothing to
    render, and PermissionError when the user's tier or credits forbid export.
    Flushes the credit change but does not commit; caller controls the
    transaction. Returns (title, pdf_bytes).
    """
    title = default_title
    if plan_id:
        plan = get_plan(session, user, plan_id)
        if plan is None:
            raise LookupError("Plan not found")
        markdown = plan.markdown
        title = schedule_title(plan.baby_age_months, default_title)
    elif markdown is None:
        raise ValueError("No plan or schedule provided")

    check_export_access(user)
    if not markdown:
        raise ValueError("No content to generate PDF from")

    pdf = render_markdown(markdown, title, layout)
    consume_export_credit(session, user)
    logger.info("exported %r for %s (%d bytes)", title, user.email, len(pdf))
    return title, pdf
