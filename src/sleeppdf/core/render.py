"""Paginating renderer: draws sections onto reportlab pages with check-before-draw page breaks"""

import logging
from io import BytesIO

from reportlab.pdfgen import canvas

from sleeppdf.core.layout import RGB, PageLayout, wrap_text
from sleeppdf.core.models import Section


logger = logging.getLogger(__name__)


class NumberedCanvas(canvas.Canvas):
    """Canvas that defers page output so every page can be numbered once the count is final."""

    def __init__(self, *args, layout: PageLayout, **kwargs):
        super().__init__(*args, **kwargs)
        self._layout = layout
        self._saved_page_states: list[dict] = []

    def showPage(self):
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        for number, state in enumerate(self._saved_page_states, start=1):
            self.__dict__.update(state)
            self._draw_page_number(number)
            super().showPage()
        super().save()

    def _draw_page_number(self, number: int) -> None:
        lay = self._layout
        self.setFont(lay.font, lay.page_number_size)
        self.setFillColorRGB(*lay.title_color)
        self.drawString(lay.width - lay.page_number_inset, lay.page_number_y, str(number))


class PageWriter:
    """Mutable layout cursor: current page index and vertical position over one canvas.

    Each document render owns its own writer; nothing is shared between renders.
    """

    def __init__(self, pdf, layout: PageLayout):
        self.pdf = pdf
        self.layout = layout
        self.page_index = 0
        self.y = layout.top

    @classmethod
    def open(cls, buffer: BytesIO, layout: PageLayout) -> "PageWriter":
        pdf = NumberedCanvas(buffer, pagesize=(layout.width, layout.height), layout=layout)
        return cls(pdf, layout)

    @property
    def page_count(self) -> int:
        return self.page_index + 1

    def new_page(self) -> None:
        self.pdf.showPage()
        self.page_index += 1
        self.y = self.layout.top
        logger.debug("page break -> page %d", self.page_count)

    def ensure_space(self, needed: float) -> None:
        """Start a new page when the cursor has dropped below needed."""
        if self.y < needed:
            self.new_page()

    def draw_text(self, text: str, x: float, size: float, color: RGB) -> None:
        self.pdf.setFont(self.layout.font, size)
        self.pdf.setFillColorRGB(*color)
        self.pdf.drawString(x, self.y, text)

    def draw_divider(self) -> None:
        lay = self.layout
        self.ensure_space(lay.bottom_margin)
        self.pdf.setStrokeColorRGB(*lay.divider_color)
        self.pdf.setLineWidth(lay.divider_width)
        self.pdf.line(lay.margin_x, self.y, lay.content_right, self.y)
        self.y -= lay.divider_gap

    def draw_title(self, title: str) -> None:
        lay = self.layout
        self.draw_text(title, lay.margin_x, lay.title_size, lay.title_color)
        self.y -= lay.title_gap

    def finish(self) -> None:
        """Close the last page, number every page and write the document."""
        self.pdf.showPage()
        self.pdf.save()


def render_section(writer: PageWriter, section: Section) -> None:
    """Draw one flushed section, then empty it."""
    if not section.heading:
        return
    lay = writer.layout

    writer.ensure_space(lay.heading_reserve)
    writer.draw_text(section.heading, lay.margin_x, lay.heading_size, lay.title_color)
    writer.y -= lay.heading_gap

    if section.time_label:
        writer.draw_text(section.time_label, lay.margin_x, lay.label_size, lay.label_color)
        writer.y -= lay.label_gap

    for bullet in section.bullets:
        for idx, chunk in enumerate(wrap_text(bullet, lay.wrap_width)):
            writer.ensure_space(lay.line_reserve)
            prefix = lay.bullet_prefix if idx == 0 else lay.continuation_prefix
            writer.draw_text(prefix + chunk.strip(), lay.bullet_x, lay.body_size, lay.body_color)
            writer.y -= lay.line_height
        writer.y -= lay.bullet_gap

    writer.draw_divider()
    section.clear()
