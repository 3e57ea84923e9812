"""Reusable UI components."""
from src.ui.components.stats_card import stats_card
from src.ui.components.product_item import product_item
from src.ui.components.sidebar import SideBarNode, SubItem, build_sidebar_tree, sidebar_item
from src.ui.components.helpers import format_currency, page_header

__all__ = [
    "stats_card",
    "product_item",
    "SideBarNode",
    "SubItem",
    "build_sidebar_tree",
    "sidebar_item",
    "format_currency",
    "page_header",
]
