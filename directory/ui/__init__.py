"""
UI components and layout for the provider listing page.
"""

from .components import create_provider_card, create_provider_cards, format_fees
from .layout import create_layout

__all__ = [
    'create_layout',
    'create_provider_card',
    'create_provider_cards',
    'format_fees',
]
