"""Two-level sidebar navigation tree (item -> sub-items)."""
from dataclasses import dataclass, field
from typing import Callable

from nicegui import ui

from src.ui.components.helpers import HOVER_BG


@dataclass(frozen=True)
class SubItem:
    title: str
    path: str


@dataclass
class SideBarNode:
    """A sidebar item. Only ``expanded`` changes after construction."""

    title: str
    icon: str
    sub_items: list[SubItem] = field(default_factory=list)
    expanded: bool = field(init=False)

    def __post_init__(self):
        self.sub_items = list(self.sub_items)
        self.expanded = bool(self.sub_items)

    @property
    def has_sub_items(self) -> bool:
        return bool(self.sub_items)

    @property
    def shows_sub_items(self) -> bool:
        return self.expanded and self.has_sub_items

    def toggle(self) -> bool:
        """Flip this node's expansion only; returns the new state."""
        self.expanded = not self.expanded
        return self.expanded


def build_sidebar_tree(items: list[dict]) -> list[SideBarNode]:
    """Build nodes from config dicts ``{title, icon, sub_items: [{title, path}]}``."""
    return [
        SideBarNode(
            title=item["title"],
            icon=item.get("icon", "folder"),
            sub_items=[SubItem(s["title"], s["path"]) for s in item.get("sub_items", [])],
        )
        for item in items
    ]


def sidebar_sub_item(sub_item: SubItem, on_navigate: Callable[[str], None] | None = None):
    """Render a sub-item row; clicking it emits its path."""
    navigate = on_navigate or ui.navigate.to
    with ui.row().classes(
        "items-center justify-between pl-10 pr-4 py-1 rounded w-full "
        f"{HOVER_BG} cursor-pointer"
    ).on("click", lambda _, path=sub_item.path: navigate(path)):
        with ui.row().classes("items-center gap-2"):
            ui.icon("fiber_manual_record", size="6px").classes("text-accent")
            ui.label(sub_item.title).classes("text-body2 text-secondary")
        ui.icon("chevron_right", size="xs").classes("text-grey-6")


def sidebar_item(node: SideBarNode, on_navigate: Callable[[str], None] | None = None):
    """Render a sidebar item with its collapsible sub-item list."""
    with ui.column().classes("w-full gap-0"):
        with ui.row().classes(
            "items-center justify-between gap-3 px-4 py-2 rounded-lg w-full "
            f"{HOVER_BG} cursor-pointer"
        ) as header:
            with ui.row().classes("items-center gap-3"):
                ui.icon(node.icon).classes("text-secondary")
                ui.label(node.title).classes("text-body1 text-secondary")
            chevron = ui.icon("chevron_right", size="xs").classes("text-grey-6")

        children = ui.column().classes("w-full gap-0")
        with children:
            for sub_item in node.sub_items:
                sidebar_sub_item(sub_item, on_navigate)

        def _sync():
            children.set_visibility(node.shows_sub_items)
            chevron.style(
                "transform: rotate(90deg)" if node.shows_sub_items else "transform: none"
            )

        def _toggle():
            node.toggle()
            _sync()

        header.on("click", _toggle)
        _sync()
