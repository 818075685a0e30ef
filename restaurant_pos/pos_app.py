"""Main Textual app class."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from restaurant_pos.catalog import MenuCatalog, default_catalog
from restaurant_pos.constant import DONE_KEYWORD
from restaurant_pos.ledger import SalesLedger
from restaurant_pos.models import MenuItem, Order
from restaurant_pos.rendering import format_menu, format_menu_item, format_order, format_orders
from restaurant_pos.report import build_sales_report
from restaurant_pos.report_modal import ReportModal

logger = logging.getLogger(__name__)

# Main-menu key -> (action name, label). Kept outside the core models.
MAIN_MENU_COMMANDS: dict[str, tuple[str, str]] = {
    "1": ("view_menu", "View Menu"),
    "2": ("place_order", "Place Order"),
    "3": ("view_orders", "View Orders"),
    "4": ("sales_report", "Generate Sales Report"),
    "5": ("exit_pos", "Exit"),
}

INVALID_CHOICE_MESSAGE = "Invalid choice. Please try again."
ITEM_ADDED_MESSAGE = "Item added to order."
ITEM_NOT_FOUND_MESSAGE = "Item not found in menu."
EXIT_MESSAGE = "Exiting the system. Goodbye!"


class PosApp(App):
    """A Textual app for taking restaurant orders and reporting sales."""

    TITLE = "Restaurant Management System"
    SUB_TITLE = "Point of Sale"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #display-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #entry-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #entry-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 4;
    }

    #matches {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #display {
        height: 1fr;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    input_state = reactive("normal")
    entry_text = reactive("")

    BINDINGS = [
        ("escape", "finish_order", "Finish order"),
        ("ctrl+c", "finish_order", "Finish order"),
        Binding("ctrl+q", "exit_pos", "Quit", priority=True),
    ]

    def __init__(self, catalog: MenuCatalog | None = None, ledger: SalesLedger | None = None) -> None:
        super().__init__()
        self.catalog = catalog if catalog is not None else default_catalog()
        self.ledger = ledger if ledger is not None else SalesLedger()
        self.current_order: Order | None = None
        self.system_status = ""
        self.display_content: Text = Text()
        logger.debug("app_init menu_items=%d", len(self.catalog))

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="display-pane"):
                yield Static("--- Restaurant Management System ---", classes="pane-title")
                yield Static(id="display")
            with Vertical(id="entry-pane"):
                yield Static(id="entry-bar")
                yield Static(id="matches")

    def on_mount(self) -> None:
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, ModalScreen):
            return

        logger.debug("on_key key=%r char=%r state=%r", event.key, event.character, self.input_state)

        if self.input_state == "ordering":
            self._handle_order_entry_key(event)
            return

        if not event.is_printable or not event.character:
            return
        self.dispatch_command(event.character)
        event.stop()

    def dispatch_command(self, choice: str) -> None:
        """Run the main-menu command bound to `choice`."""
        command = MAIN_MENU_COMMANDS.get(choice.strip())
        if command is None:
            self.system_status = INVALID_CHOICE_MESSAGE
            self._refresh_entry()
            return
        action_name, _ = command
        self.system_status = ""
        getattr(self, f"action_{action_name}")()

    def action_view_menu(self) -> None:
        self._show(format_menu(self.catalog.list()))

    def action_place_order(self) -> None:
        if self.input_state == "ordering":
            return
        self.current_order = self.ledger.create_order()
        self.input_state = "ordering"
        self.entry_text = ""
        self.system_status = ""
        logger.debug("order_started order_id=%d", self.current_order.id())
        self._show(format_menu(self.catalog.list()))

    def action_view_orders(self) -> None:
        self._show(format_orders(self.ledger.all_orders()))

    def action_sales_report(self) -> None:
        report = build_sales_report(self.ledger.all_orders())
        logger.debug("sales_report total=%s orders=%d", report.total_sales, report.order_count)
        self.push_screen(ReportModal(report))

    def action_exit_pos(self) -> None:
        logger.info("app_exit orders=%d", len(self.ledger))
        self.exit(message=EXIT_MESSAGE)

    def action_finish_order(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state != "ordering" or self.current_order is None:
            return

        order = self.current_order
        self.current_order = None
        self.input_state = "normal"
        self.entry_text = ""
        self.system_status = f"Order {order.id()} recorded"
        logger.debug("order_finished order_id=%d items=%d total=%s", order.id(), len(order.items()), order.total_price())

        summary = Text("Your order:\n")
        summary.append_text(format_order(order))
        self._show(summary)

    def submit_entry(self) -> None:
        """Look up the typed dish name and add it to the current order."""
        if self.current_order is None:
            return

        typed = self.entry_text.strip()
        self.entry_text = ""
        if not typed:
            self._refresh_entry()
            return
        if typed.lower() == DONE_KEYWORD:
            self.action_finish_order()
            return

        item = self.catalog.find_by_name(typed)
        if item is None:
            self.system_status = ITEM_NOT_FOUND_MESSAGE
            logger.debug("order_item_missing order_id=%d query=%r", self.current_order.id(), typed)
        else:
            self.current_order.add_item(item)
            self.system_status = ITEM_ADDED_MESSAGE
            logger.debug("order_item_added order_id=%d item=%r", self.current_order.id(), item.name)
        self._refresh_entry()

    def _handle_order_entry_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.action_finish_order()
            event.stop()
            return

        if event.key == "enter":
            self.submit_entry()
            event.stop()
            return

        if event.key == "backspace":
            if self.entry_text:
                self.entry_text = self.entry_text[:-1]
                self._refresh_entry()
            event.stop()
            return

        if event.is_printable and event.character and len(event.character) == 1:
            self.entry_text += event.character
            self._refresh_entry()
            event.stop()

    def _matching_items(self) -> list[MenuItem]:
        source = list(self.catalog.list())
        q = self.entry_text.strip().lower()
        if not q:
            return source
        return [item for item in source if q in item.name.lower()]

    def _main_menu_text(self) -> Text:
        text = Text()
        for idx, (key, (_, label)) in enumerate(MAIN_MENU_COMMANDS.items()):
            if idx > 0:
                text.append("\n")
            text.append(f"{key}. ", style="bold")
            text.append(label)
        return text

    def _show(self, content: Text) -> None:
        self.display_content = content
        self._refresh_all()

    def _refresh_all(self) -> None:
        self._refresh_display()
        self._refresh_entry()

    def _refresh_display(self) -> None:
        try:
            display = self.query_one("#display", Static)
        except NoMatches:
            return
        text = Text()
        text.append_text(self._main_menu_text())
        if self.display_content.plain:
            text.append("\n\n")
            text.append_text(self.display_content)
        display.update(text)

    def _refresh_entry(self) -> None:
        try:
            bar = self.query_one("#entry-bar", Static)
            matches = self.query_one("#matches", Static)
        except NoMatches:
            return

        status = self.system_status or "Ready"
        if self.input_state == "normal":
            bar.update(f"Choose an option (1-5).\n{status}")
            matches.update("")
            return

        order_id = self.current_order.id() if self.current_order is not None else "?"
        text = Text()
        text.append(f"Order {order_id}", style="bold")
        text.append(f": {self.entry_text}")
        text.append(f"\nType a dish name, Enter to add, '{DONE_KEYWORD}' or Esc to finish.\n{status}")
        bar.update(text)

        results = self._matching_items()
        if not results:
            matches.update("No matches")
            return
        lines = Text()
        for idx, item in enumerate(results):
            if idx > 0:
                lines.append("\n")
            lines.append_text(format_menu_item(item))
        matches.update(lines)
