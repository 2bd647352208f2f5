# ABOUTME: Table classification and row parsing for residence consumption tables
# ABOUTME: Matches a table to a residence by its first header cell and splits rows into cell values

from collections.abc import Collection

from anno_consumption.extraction.patterns import extract_tag


def singularize(title: str) -> str:
    """Drop a single trailing ``s``. Purely a suffix trim, not a linguistic rule."""
    return title[:-1] if title.endswith("s") else title


def table_title(fragment: str) -> str | None:
    """Return the singularized first header cell of the table's first row.

    Returns:
        The title, or None when the table has no rows or its first row has no header cell
    """
    rows = extract_tag(fragment, "tr")
    if not rows:
        return None

    headers = extract_tag(rows[0], "th", strip_inner_tags=True)
    if not headers:
        return None

    return singularize(headers[0])


def classify_table(fragment: str, categories: Collection[str]) -> str | None:
    """Return the residence category a table fragment belongs to, or None if irrelevant."""
    title = table_title(fragment)
    if title is not None and title in categories:
        return title
    return None


def parse_row(row: str) -> list[str] | None:
    """Split one ``<tr>`` fragment into header cells followed by data cells.

    Returns None for rows without a header cell.
    """
    headers = extract_tag(row, "th", strip_inner_tags=True)
    if not headers:
        return None
    return headers + extract_tag(row, "td", strip_inner_tags=True)


def parse_rows(fragment: str) -> list[list[str]]:
    """Parse every header-bearing row of a table fragment, in document order.

    The title row is kept as a one-cell row. Rows may differ in length.
    """
    rows = []
    for row in extract_tag(fragment, "tr"):
        cells = parse_row(row)
        if cells is not None:
            rows.append(cells)
    return rows
