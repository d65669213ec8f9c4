"""Blog Text Utilities — reading time, category labels, table of contents.

Invariants:
    - Pure string processing, no IO
    - Reading time is at least 1 minute for non-empty content (ceil of words / 200)
    - Table of contents covers only ## and ### headings, in document order
"""

import math
import re

from agency.core.domain_types import POST_CATEGORY_LABELS, PostCategory

WORDS_PER_MINUTE = 200

_HEADING_RE = re.compile(r"^(#{2,3})\s+(.+)$", re.MULTILINE)
_WORD_RE = re.compile(r"\S+")
_ANCHOR_STRIP_RE = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RE = re.compile(r"\s+")


def calculate_reading_time(content: str) -> int:
    words = len(_WORD_RE.findall(content))
    if words == 0:
        return 0
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


def format_category(category: str) -> str:
    try:
        return POST_CATEGORY_LABELS[PostCategory(category)]
    except ValueError:
        return category


def heading_anchor(text: str) -> str:
    anchor = _ANCHOR_STRIP_RE.sub("", text.lower())
    return _WHITESPACE_RE.sub("-", anchor.strip())


def generate_table_of_contents(content: str) -> list[dict]:
    return [
        {
            "level": len(match.group(1)),
            "text": match.group(2).strip(),
            "id": heading_anchor(match.group(2).strip()),
        }
        for match in _HEADING_RE.finditer(content)
    ]
