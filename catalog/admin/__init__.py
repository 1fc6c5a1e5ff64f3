"""
Admin tool: product form and session command dispatch.
"""

from .form import ProductForm
from .session import KEYBOARD_SHORTCUTS, AdminSession

__all__ = ['AdminSession', 'KEYBOARD_SHORTCUTS', 'ProductForm']
