"""Line cleaning and classification for the schedule markdown dialect"""

import re

from sleeppdf.core.models import ClassifiedLine, LineKind


UNSUPPORTED_RE = re.compile(r'[^\x20-\x7E]')
NORMALIZE_RE = re.compile(r'[^\w\s-]')
SEPARATOR_RE = re.compile(r'[\s-]+')
HEADING_PREFIX_RE = re.compile(r'^#+\s*')
INLINE_BOLD_RE = re.compile(r'\*\*(.*?)\*\*')
CODE_FENCE = '```'


def clean_line(line: str) -> str:
    """Trim a raw line and drop everything outside printable ASCII (emoji, non-Latin text)."""
    return UNSUPPORTED_RE.sub('', line.strip())


def normalize(text: str) -> str:
    """Keep word characters, whitespace and hyphens, lowercased.

    Runs of whitespace and hyphens collapse to one space, so '3-Month-Old'
    and '3 Month Old' compare equal.
    """
    text = NORMALIZE_RE.sub('', text).lower()
    return SEPARATOR_RE.sub(' ', text).strip()


def strip_inline_bold(text: str) -> str:
    """Reduce **text** markers to plain text and trim."""
    return INLINE_BOLD_RE.sub(r'\1', text).strip()


def is_title_echo(clean: str, title: str) -> bool:
    """True if the cleaned line restates the document title."""
    norm_title = normalize(title)
    return bool(norm_title) and norm_title in normalize(clean)


def classify_line(line: str, title: str) -> ClassifiedLine:
    """Classify one raw line against the document title. First matching rule wins."""
    clean = clean_line(line)

    if clean.startswith(CODE_FENCE):
        return ClassifiedLine(clean, LineKind.code_fence)
    if is_title_echo(clean, title):
        return ClassifiedLine(clean, LineKind.title_echo)
    if clean.startswith('##'):
        return ClassifiedLine(HEADING_PREFIX_RE.sub('', clean), LineKind.heading)
    if clean.startswith('**') and clean.endswith('**'):
        return ClassifiedLine(clean.replace('**', '').strip(), LineKind.bold_label)
    if clean.startswith('- '):
        return ClassifiedLine(strip_inline_bold(clean[2:]), LineKind.bullet)
    if clean:
        return ClassifiedLine(strip_inline_bold(clean), LineKind.continuation)
    return ClassifiedLine('', LineKind.blank)


def classify_lines(markdown: str, title: str) -> list[ClassifiedLine]:
    """Split markdown on newlines and classify each line."""
    return [classify_line(line, title) for line in markdown.split('\n')]
