"""Shared layout: header, sidebar navigation, and content area."""
from nicegui import ui

from config import APP_TITLE, SIDEBAR_ITEMS
from src.ui.components.sidebar import build_sidebar_tree, sidebar_item


def build_layout(title: str = APP_TITLE):
    """Create the shared page layout with sidebar navigation."""
    ui.colors(
        primary="#4A4443",
        secondary="#5f6368",
        accent="#A08968",
        positive="#34a853",
        negative="#ea4335",
    )

    with ui.header().classes("items-center justify-between px-4 bg-primary"):
        with ui.row().classes("items-center gap-3"):
            ui.icon("savings").classes("text-white text-2xl")
            ui.label(title).classes("text-subtitle1 text-white")
        ui.space()

    # Left drawer (sidebar nav). Nodes are built per page so expansion
    # state belongs to this client only.
    with ui.left_drawer(value=True).classes("bg-grey-1") as drawer:
        drawer.props("width=260 bordered")
        ui.element("div").classes("h-3")
        for node in build_sidebar_tree(SIDEBAR_ITEMS):
            sidebar_item(node)

    content = ui.column().classes("w-full p-6 max-w-7xl mx-auto gap-4")
    return content
