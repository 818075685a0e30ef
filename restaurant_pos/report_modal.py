"""Sales report modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from restaurant_pos.rendering import format_sales_report
from restaurant_pos.report import SalesReport


class ReportModal(ModalScreen[None]):
    """Show the sales report until dismissed."""

    CSS = """
    ReportModal {
        align: center middle;
        background: $background 60%;
    }

    #report-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #report-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #report-body {
        color: white;
        margin-bottom: 1;
    }

    #report-help {
        color: #dddddd;
    }
    """

    def __init__(self, report: SalesReport) -> None:
        super().__init__()
        self.report = report

    def compose(self) -> ComposeResult:
        with Container(id="report-dialog"):
            yield Static("Sales Report", id="report-title")
            yield Static(id="report-body")
            yield Static("Enter / Esc / q to close", id="report-help")

    def on_mount(self) -> None:
        body = self.query_one("#report-body", Static)
        body.update(
            f"{format_sales_report(self.report)}\n"
            f"Orders: {self.report.order_count}"
        )

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "q", "enter", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
