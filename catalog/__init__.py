"""
Static Product Catalog Toolkit

Modules:
    models       - Data models (SupplierLink, LinkFormat, view models)
    common       - Shared utilities (config loader, CSV dialect, logging, text helpers)
    core         - Catalog store, link normalizer, filter engine
    interchange  - JSON/CSV import, JSON export, products file loader, clipboard
    admin        - Product form and admin session commands
    storefront   - Public catalog browsing
"""
