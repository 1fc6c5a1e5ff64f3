"""
Catalog Importer

Parses JSON and minimal-CSV documents into product lists. Parsing never
touches a store; callers load the result only when parsing succeeded, so a
failed import leaves the catalog as it was.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from ..common.csv_utils import clean_csv_field, read_csv_rows
from ..common.text_utils import parse_leading_float, parse_leading_int

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ('.json', '.csv')


def parse_json_catalog(text: str) -> List[Dict[str, Any]]:
    """
    Parse a JSON catalog document.

    Ids are taken as given, never reassigned.

    Raises:
        ValueError: If the text is not valid JSON or the root is not an array
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise ValueError(
            f"Invalid JSON format: expected an array of products, got {type(data).__name__}"
        )
    return data


def _parse_csv_id(value: str, position: int) -> int:
    parsed = parse_leading_int(value)
    return parsed if parsed else position


def parse_csv_catalog(text: str) -> List[Dict[str, Any]]:
    """
    Parse a CSV catalog document.

    The first line names the fields. Every record gets an 'id' (its 1-based
    row position unless an 'id' column supplies a usable integer). Blank
    lines are dropped but still count towards later row positions. A 'price'
    column becomes the float its text starts with, 0 when there is none.
    Header matching for these two columns is case-insensitive; keys keep
    the header's spelling.

    Example:
        name,price,id
        Widget,9.99 GBP,5  -> {'id': 5, 'name': 'Widget', 'price': 9.99}
        Gadget,abc,        -> {'id': 2, 'name': 'Gadget', 'price': 0.0}

    Raises:
        ValueError: If the document is empty
    """
    headers, rows = read_csv_rows(text)

    products = []
    for position, row in rows:
        record: Dict[str, Any] = {'id': position}
        for index, header in enumerate(headers):
            value: Any = clean_csv_field(row[index]) if index < len(row) else ''
            if header.lower() == 'price':
                value = parse_leading_float(value)
            elif header.lower() == 'id':
                value = _parse_csv_id(value, position)
            record[header] = value
        products.append(record)

    logger.debug("Parsed %d CSV rows with columns %s", len(products), headers)
    return products


def import_catalog_file(file_path: str | Path) -> List[Dict[str, Any]]:
    """
    Read and parse a .json or .csv catalog file (UTF-8).

    Raises:
        ValueError: Unsupported extension or unparsable content
        OSError: File missing or unreadable
    """
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported file type: {path.name} (expected .json or .csv)")

    text = path.read_text(encoding='utf-8')
    if suffix == '.json':
        products = parse_json_catalog(text)
    else:
        products = parse_csv_catalog(text)

    logger.info("Read %d products from %s", len(products), path)
    return products
