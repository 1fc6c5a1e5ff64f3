"""
Static Products File Loader

Reads the published products.json, either over HTTP or from disk.
A missing or unreadable file is not an error for either front end: the
storefront shows an empty catalog and the admin tool starts blank.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests

from ..common.constants import EXPORT_MIME_TYPE

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


def _is_http_source(source: str) -> bool:
    return source.lower().startswith(('http://', 'https://'))


def _fetch_text(url: str, timeout: float, session: Optional[requests.Session]) -> Optional[str]:
    """GET the products file. Returns None on any failure."""
    http = session or requests
    try:
        response = http.get(url, headers={'Accept': EXPORT_MIME_TYPE}, timeout=timeout)
    except requests.exceptions.Timeout:
        logger.warning("Timed out fetching %s", url)
        return None
    except requests.exceptions.RequestException as e:
        logger.warning("Could not fetch %s: %s", url, e)
        return None

    if response.status_code != 200:
        logger.info("No products file at %s (HTTP %d)", url, response.status_code)
        return None

    response.encoding = 'utf-8'
    return response.text


def _read_text(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding='utf-8')
    except FileNotFoundError:
        logger.info("No products file at %s", path)
    except OSError as e:
        logger.warning("Could not read %s: %s", path, e)
    return None


def load_products(
    source: str | Path,
    timeout: float = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> List[Dict[str, Any]]:
    """
    Load the product list from a URL or local path.

    Args:
        source: http(s) URL or filesystem path of products.json
        timeout: HTTP timeout in seconds
        session: Optional requests session to reuse

    Returns:
        The product list, or [] when the file is missing, unreachable,
        malformed or not a JSON array
    """
    source_str = str(source)
    if _is_http_source(source_str):
        text = _fetch_text(source_str, timeout, session)
    else:
        text = _read_text(Path(source_str))

    if text is None:
        return []

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning("Products file %s is not valid JSON: %s", source_str, e)
        return []

    if not isinstance(data, list):
        logger.warning("Products file %s does not contain a JSON array", source_str)
        return []

    logger.info("Loaded %d products from %s", len(data), source_str)
    return data
