"""
Catalog Exporter

Serializes the catalog to the pretty-printed JSON interchange format.
There is no CSV export.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from ..common.constants import JSON_INDENT, PRODUCTS_FILENAME

logger = logging.getLogger(__name__)


def export_json(products: List[Dict[str, Any]]) -> str:
    """Serialize products as a 2-space indented JSON array, field order as stored."""
    return json.dumps(products, indent=JSON_INDENT, ensure_ascii=False)


def write_export_file(
    products: List[Dict[str, Any]],
    file_path: str | Path = PRODUCTS_FILENAME,
) -> Path:
    """
    Write the catalog to a JSON file.

    Args:
        products: Catalog contents
        file_path: Output path (default: products.json)

    Returns:
        Path written
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    path.write_text(export_json(products) + '\n', encoding='utf-8')
    logger.info("Exported %d products to %s", len(products), path)
    return path
