"""
CSV Utilities

Helpers for the minimal CSV dialect accepted by the catalog importer:
comma-delimited lines, a header row, no quoted commas. Each field is trimmed,
loses one surrounding pair of double quotes, and has doubled quotes unescaped.
"""

from typing import List, Tuple


def clean_csv_field(raw: str) -> str:
    """
    Normalize a single raw CSV field.

    Args:
        raw: Field text as split from the line

    Returns:
        Trimmed value with one leading and one trailing quote removed
        and "" unescaped to "
    """
    value = raw.strip()
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value.replace('""', '"')


def split_csv_line(line: str) -> List[str]:
    """Split a line on every comma. Quoted commas are not supported."""
    return line.split(',')


def read_csv_rows(text: str) -> Tuple[List[str], List[Tuple[int, List[str]]]]:
    """
    Split CSV text into a header row and numbered data rows.

    Blank lines produce no row but still count towards the 1-based
    position of the rows after them. Header names are trimmed but otherwise
    kept as written so they can be used as record keys.

    Args:
        text: Full CSV document

    Returns:
        Tuple of (headers, rows) where each row is (position, raw fields)

    Raises:
        ValueError: If the text contains no header row
    """
    lines = text.strip().split('\n')
    if not lines[0].strip():
        raise ValueError("CSV file is empty")

    headers = [header.strip() for header in split_csv_line(lines[0])]
    rows = [
        (position, split_csv_line(line))
        for position, line in enumerate(lines[1:], 1)
        if line.strip()
    ]
    return headers, rows
