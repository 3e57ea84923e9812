"""Fixed income fund page -- portfolio summary + products listing."""
import logging

from nicegui import ui

from config import SEED_FILE
from src.services.snapshot_importer import (
    SnapshotImportError, load_products, seed_if_empty,
)
from src.ui.components.helpers import format_currency, page_header
from src.ui.components.stats_card import stats_card
from src.ui.layout import build_layout
from src.ui.pages.products import products_view

logger = logging.getLogger(__name__)


def fixed_income_fund_page():
    """Render the fund overview with the products listing below it."""
    content = build_layout()

    with content:
        page_header(
            "Fixed Income",
            subtitle="Your fixed income positions.",
            icon="account_balance",
        )

        try:
            seed_if_empty(SEED_FILE)
        except SnapshotImportError as exc:
            logger.error("Could not load seed snapshots: %s", exc)
            ui.notify(f"Could not load seed data: {exc}", type="negative")

        products = load_products()
        total_applied = sum(p.value_applied for p in products)

        with ui.row().classes("w-full gap-4"):
            stats_card("Products", str(len(products)), icon="inventory_2")
            stats_card(
                "Total Invested", format_currency(total_applied),
                icon="payments", color="positive",
            )

        if not products:
            ui.label("No fixed income products yet.").classes("text-body1 text-secondary")
            return

        products_view(products)
