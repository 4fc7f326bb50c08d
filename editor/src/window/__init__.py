"""Main window mixins for ComposeEditor"""

from .menu_mixin import MenuMixin
from .asset_mixin import AssetMixin

__all__ = ['MenuMixin', 'AssetMixin']
