"""Single row in the fixed income products listing."""
from nicegui import ui

from src.ui.components.helpers import ROW_BG, ROW_BG_INVERT, format_currency


def product_item(product, invert: bool = False):
    """Render one product: name, due date and amount invested.

    Args:
        product: Any object with ``name``, ``due_date`` and ``value_applied``.
        invert: Use the alternate background (odd rows).
    """
    bg = ROW_BG_INVERT if invert else ROW_BG
    with ui.row().classes("items-center w-full gap-4 px-4 py-3 rounded").style(
        f"background: {bg}; border-left: 3px solid #A08968"
    ):
        with ui.column().classes("flex-1 gap-0"):
            ui.label("Title").classes("text-caption text-secondary")
            ui.label(product.name).classes("text-subtitle2 font-bold")
        with ui.column().classes("gap-0").style("min-width:120px"):
            ui.label("Due Date").classes("text-caption text-secondary")
            ui.label(product.due_date).classes("text-body2")
        with ui.column().classes("gap-0 items-end").style("min-width:140px"):
            ui.label("Amount Invested").classes("text-caption text-secondary")
            ui.label(format_currency(product.value_applied)).classes(
                "text-body2 text-positive"
            )
