"""
Shared constants for the catalog tools.

Single source of truth for values shared by the admin tool and the storefront.
"""

# Interchange file
PRODUCTS_FILENAME = "products.json"
EXPORT_MIME_TYPE = "application/json"
JSON_INDENT = 2

# Category selector value meaning "no restriction"
ALL_CATEGORIES = "all"
UNCATEGORIZED_LABEL = "Uncategorized"

# The admin form has four link/supplier slots; the storefront shows up to four
MAX_LINKS = 4

SUPPLIER_FALLBACK = "Supplier"
NO_SUPPLIERS_LABEL = "None"
NO_LINKS_MESSAGE = "No affiliate links available."

# Prices are displayed in pounds sterling
CURRENCY_SYMBOL = "£"

# Only these URL schemes render as images or count as valid links
WEB_SCHEMES = frozenset({"http", "https"})
