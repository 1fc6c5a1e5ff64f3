"""
Storefront: filtered product cards and product detail views.
"""

from .view import Storefront, build_card, build_detail

__all__ = ['Storefront', 'build_card', 'build_detail']
