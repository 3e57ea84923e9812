"""Products listing -- search, sort and paginate fixed income positions."""
import logging

from nicegui import ui

from config import PAGE_SIZE, SEARCH_DEBOUNCE_SECONDS, SORT_OPTIONS
from src.services.debounce import Debouncer
from src.services.products_pipeline import ProductsPipeline
from src.ui.components.product_item import product_item

logger = logging.getLogger(__name__)


def products_view(products, page_size: int = PAGE_SIZE) -> ProductsPipeline:
    """Render the "My Fixed Income" listing for *products*.

    The listing keeps its own view state in a ProductsPipeline; widgets only
    forward user input to it and re-render the visible page.

    Returns the pipeline so the parent can swap the source collection.
    """
    pipeline = ProductsPipeline(products, page_size=page_size)

    with ui.card().classes("w-full p-5 gap-3"):
        # --- Title + controls ---
        with ui.row().classes("w-full items-center justify-between"):
            ui.label("My Fixed Income").classes("text-h6 font-bold")
            with ui.row().classes("items-center gap-3"):
                sort_select = ui.select(
                    SORT_OPTIONS,
                    value=None,
                    label="Sort by",
                    clearable=True,
                ).props("outlined dense").classes("w-48")
                search_input = ui.input(
                    placeholder="Search by name...",
                ).props("outlined dense clearable").classes("w-64")
                search_input.props('prepend-inner-icon="search"')

        product_container = ui.column().classes("w-full gap-1")

        # --- Pagination controls ---
        with ui.row().classes("w-full items-center gap-3"):
            count_label = ui.label("").classes("text-body2 text-secondary flex-1")
            prev_btn = ui.button(icon="chevron_left").props("flat dense round")
            page_label = ui.label("").classes("text-body2 font-bold")
            next_btn = ui.button(icon="chevron_right").props("flat dense round")

    def refresh_products():
        product_container.clear()
        state = pipeline.pagination
        page_products = pipeline.visible_page()

        if state.take:
            count_label.text = (
                f"Showing {state.skip + 1}-{state.skip + state.take} of {state.total} products"
            )
        else:
            count_label.text = f"0 of {state.total} products"
        page_label.text = f"Page {state.page} of {state.total_pages}"
        prev_btn.set_enabled(state.has_previous)
        next_btn.set_enabled(state.has_next)

        with product_container:
            if not page_products:
                ui.label("No products match your search.").classes(
                    "text-body2 text-secondary"
                )
                return
            for index, product in enumerate(page_products):
                product_item(product, invert=index % 2 != 0)

    def _on_search(text):
        pipeline.set_search_text(text)
        refresh_products()

    debounced_search = Debouncer(_on_search, delay=SEARCH_DEBOUNCE_SECONDS)

    def _on_search_input(e):
        debounced_search(e.value or "")

    def _on_sort_change(e):
        pipeline.set_sort_key(e.value)
        refresh_products()

    def _go_to(page: int):
        pipeline.set_page(page)
        refresh_products()

    search_input.on_value_change(_on_search_input)
    sort_select.on_value_change(_on_sort_change)
    prev_btn.on_click(lambda: _go_to(pipeline.pagination.page - 1))
    next_btn.on_click(lambda: _go_to(pipeline.pagination.page + 1))

    refresh_products()
    return pipeline
