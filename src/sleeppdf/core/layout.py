"""Page geometry, fonts and colors for schedule PDFs"""

from dataclasses import dataclass

from reportlab.lib.pagesizes import A4


RGB = tuple[float, float, float]

PASTEL_PINK: RGB = (1.0, 0.8, 0.9)
MAUVE:       RGB = (0.6, 0.4, 0.5)
CHARCOAL:    RGB = (0.2, 0.2, 0.2)


@dataclass(frozen=True)
class PageLayout:
    """Fixed layout constants. Units are PDF points, origin bottom-left."""
    width:  float = A4[0]
    height: float = A4[1]
    font:   str = "Helvetica"

    margin_x:     float = 50     # title, headings, labels and divider start here
    bullet_x:     float = 60
    top_offset:   float = 60     # distance from the top edge to the first baseline
    bottom_margin: float = 30    # no baseline is drawn below this

    title_size:   float = 20
    title_gap:    float = 40
    heading_size: float = 16
    heading_gap:  float = 22
    label_size:   float = 12
    label_gap:    float = 18
    body_size:    float = 12
    line_height:  float = 16
    bullet_gap:   float = 6
    divider_gap:  float = 16
    divider_width: float = 1

    heading_reserve: float = 80  # heading plus a label and one bullet line
    line_reserve:    float = 30
    wrap_width:      int = 90    # characters per wrapped bullet chunk

    page_number_inset: float = 40
    page_number_y:     float = 20
    page_number_size:  float = 10

    title_color:   RGB = PASTEL_PINK
    label_color:   RGB = MAUVE
    body_color:    RGB = CHARCOAL
    divider_color: RGB = PASTEL_PINK

    bullet_prefix: str = "• "
    continuation_prefix: str = "   "

    @property
    def top(self) -> float:
        return self.height - self.top_offset

    @property
    def content_right(self) -> float:
        return self.width - self.margin_x


def wrap_text(text: str, width: int) -> list[str]:
    """Hard-wrap text into chunks of at most width characters, splitting mid-word if needed."""
    if width < 1:
        raise ValueError(f"wrap width must be positive, got {width}")
    return [text[i:i + width] for i in range(0, len(text), width)] or [text]
