"""Slug generation for export file names"""

import re


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated ASCII slug ('6-Month-Old Sleep' -> '6-month-old-sleep')."""
    text = text.encode('ascii', 'ignore').decode().lower()
    text = re.sub(r'[^\w\s-]', '', text)
    return re.sub(r'[\s_-]+', '-', text).strip('-')
