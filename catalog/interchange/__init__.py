"""
Import/export adapter: JSON and CSV import, JSON export, static file
loading and clipboard copy.
"""

from .clipboard import copy_to_clipboard
from .exporter import export_json, write_export_file
from .importer import import_catalog_file, parse_csv_catalog, parse_json_catalog
from .loader import load_products

__all__ = [
    'copy_to_clipboard',
    'export_json',
    'import_catalog_file',
    'load_products',
    'parse_csv_catalog',
    'parse_json_catalog',
    'write_export_file',
]
