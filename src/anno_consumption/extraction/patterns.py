# ABOUTME: Regex-based extraction of tag-delimited fragments from raw HTML text
# ABOUTME: Shortest-match open/close spans with optional inner-tag stripping, no DOM parsing

import functools
import re

_INNER_TAG = re.compile(r"<.*?>")


@functools.lru_cache(maxsize=64)
def _compile(open_pattern: str, close_pattern: str) -> re.Pattern[str]:
    return re.compile(f"{open_pattern}(.*?){close_pattern}")


def strip_tags(fragment: str) -> str:
    """Remove every ``<...>`` span from ``fragment`` and trim surrounding whitespace."""
    return _INNER_TAG.sub("", fragment).strip()


def extract(text: str, open_pattern: str, close_pattern: str, strip_inner_tags: bool = False) -> list[str]:
    """Return the inner text of every ``open ... close`` span in ``text``.

    Matching is lazy between the delimiters, so a nested tag of the same name
    ends the span early instead of being matched as a unit. Matches are
    returned left to right; no match yields an empty list.

    Args:
        text: Text to search
        open_pattern: Regex for the opening delimiter, e.g. ``<td.*?>``
        close_pattern: Regex for the closing delimiter, e.g. ``</td>``
        strip_inner_tags: Remove nested markup from each fragment and trim it

    Returns:
        Matched inner fragments in document order
    """
    fragments = [match.group(1) for match in _compile(open_pattern, close_pattern).finditer(text)]
    if strip_inner_tags:
        return [strip_tags(fragment) for fragment in fragments]
    return fragments


def extract_tag(text: str, tag: str, strip_inner_tags: bool = False) -> list[str]:
    """Return the inner text of every ``<tag ...>...</tag>`` span in ``text``."""
    name = re.escape(tag)
    return extract(text, f"<{name}.*?>", f"</{name}>", strip_inner_tags)
