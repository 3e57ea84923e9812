"""Shared UI helper functions and design tokens."""

from nicegui import ui

from config import CURRENCY_SYMBOL


# ─── Design Tokens ────────────────────────────────────────────────────────────

CARD_CLASSES = "w-full p-5"
INPUT_PROPS = "outlined dense"
HOVER_BG = "hover:bg-[#F5F0EB]"

# Alternating row backgrounds for list views
ROW_BG = "#ffffff"
ROW_BG_INVERT = "#faf8f5"


def page_header(title: str, subtitle: str | None = None, icon: str | None = None):
    """Render a consistent page title with optional icon + subtitle."""
    with ui.row().classes("items-center gap-3"):
        if icon:
            ui.icon(icon, size="sm").classes("text-accent")
        ui.label(title).classes("text-h5 font-bold")
    if subtitle:
        ui.label(subtitle).classes("text-body2 text-secondary")


def format_currency(value, na_text: str = "-") -> str:
    """Format a monetary value, e.g. ``R$ 1,234.50``."""
    if value is None:
        return na_text
    return f"{CURRENCY_SYMBOL} {value:,.2f}"
