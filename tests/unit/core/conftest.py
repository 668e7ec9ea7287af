"""Shared fixtures for core unit tests"""

import pytest

from sleeppdf.core.layout import PageLayout
from sleeppdf.core.render import PageWriter


SCHEDULE_TITLE = "6-Month-Old Sleep Schedule"

SCHEDULE_MD = """\
## 💤 6-Month-Old Sleep Schedule
### ⏰ Wake-Up — 07:00 AM
**07:00 AM**
- Morning feed
- Diaper change
### 💤 Nap: Morning
**09:00 AM – 10:00 AM**
- Dim the room
"""


class RecordingCanvas:
    """Stand-in for a reportlab canvas that records draw calls per page."""

    def __init__(self):
        self.pages: list[list[tuple]] = [[]]
        self.font_size = None
        self.fill = None
        self.saved = False

    def setFont(self, name, size):
        self.font_size = size

    def setFillColorRGB(self, r, g, b):
        self.fill = (r, g, b)

    def setStrokeColorRGB(self, r, g, b):
        pass

    def setLineWidth(self, width):
        pass

    def drawString(self, x, y, text):
        self.pages[-1].append(("text", x, y, text, self.font_size, self.fill))

    def line(self, x1, y1, x2, y2):
        self.pages[-1].append(("line", x1, y1, x2, y2))

    def showPage(self):
        self.pages.append([])

    def save(self):
        self.saved = True

    def texts(self, page: int = None) -> list[str]:
        pages = self.pages if page is None else [self.pages[page]]
        return [op[3] for p in pages for op in p if op[0] == "text"]

    def ops(self):
        return [op for p in self.pages for op in p]


@pytest.fixture(name="schedule_md")
def schedule_md_fixture():
    return SCHEDULE_MD


@pytest.fixture(name="canvas")
def canvas_fixture():
    return RecordingCanvas()


@pytest.fixture(name="writer")
def writer_fixture(canvas):
    return PageWriter(canvas, PageLayout())


@pytest.fixture(name="short_writer")
def short_writer_fixture(canvas):
    """Writer on a 200pt-tall page: top margin at y=140, room for five bullet lines."""
    return PageWriter(canvas, PageLayout(height=200))


@pytest.fixture(name="make_writer")
def make_writer_fixture():
    """Factory for independent (writer, canvas) pairs."""
    def _make(layout: PageLayout = None) -> tuple[PageWriter, RecordingCanvas]:
        canvas = RecordingCanvas()
        return PageWriter(canvas, layout or PageLayout()), canvas
    return _make
