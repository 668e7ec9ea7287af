"""Intermediate data models for the classify, group and render pipeline"""

from dataclasses import dataclass, field
from enum import Enum


class LineKind(str, Enum):
    """Classification of a single cleaned markdown line"""
    heading = "heading"
    bold_label = "bold_label"
    bullet = "bullet"
    continuation = "continuation"
    code_fence = "code_fence"
    title_echo = "title_echo"
    blank = "blank"


@dataclass(frozen=True)
class ClassifiedLine:
    """One input line after cleaning; text is ASCII-only and trimmed."""
    text: str
    kind: LineKind


@dataclass
class Section:
    """One heading block pending render; an empty heading means nothing accumulated yet."""
    heading:    str = ""
    time_label: str = ""
    bullets:    list[str] = field(default_factory=list)

    def add_text(self, text: str) -> None:
        """Append text as a new bullet, or space-join it onto the last bullet."""
        if self.bullets:
            self.bullets[-1] += " " + text
        else:
            self.bullets.append(text)

    def clear(self) -> None:
        self.heading = ""
        self.time_label = ""
        self.bullets = []
