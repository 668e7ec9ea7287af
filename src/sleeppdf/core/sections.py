"""Grouping of classified lines into heading-scoped sections"""

import logging
from typing import Iterable, Iterator

from sleeppdf.core.models import ClassifiedLine, LineKind, Section


logger = logging.getLogger(__name__)


def group_sections(lines: Iterable[ClassifiedLine]) -> Iterator[Section]:
    """Yield each section once, when the next heading arrives or the stream ends.

    Sections with an empty heading are never yielded; text before the first
    heading is discarded along with them.
    """
    current = Section()

    for line in lines:
        if line.kind == LineKind.heading:
            if current.heading:
                logger.debug("flush section %r (%d bullets)", current.heading, len(current.bullets))
                yield current
            current = Section(heading=line.text)
        elif line.kind == LineKind.bold_label:
            current.time_label = line.text
        elif line.kind == LineKind.bullet:
            current.bullets.append(line.text)
        elif line.kind == LineKind.continuation:
            current.add_text(line.text)

    if current.heading:
        logger.debug("flush section %r (%d bullets)", current.heading, len(current.bullets))
        yield current
