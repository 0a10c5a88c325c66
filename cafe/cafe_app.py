"""Main Textual app class."""

from __future__ import annotations

import logging
from typing import Any, Callable

from rich.text import Text
from textual import work
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.widgets import Header, Static

from cafe.builder import OrderBuilder
from cafe.config import CafeConfig
from cafe.constant import FEEDBACK_MENU_OPTIONS
from cafe.data import MenuCatalog, load_catalog
from cafe.errors import NotFound, PersistenceFailure
from cafe.models import Order, OrderState, PaymentMethod
from cafe.notice_modal import NoticeModal
from cafe.parsing import parse_index, parse_quantity, parse_yes_no
from cafe.persistence import FeedbackLog, OrderStore
from cafe.pricing import PricingEngine, format_money, parse_payment_choice
from cafe.printer import check_printer_dependencies, print_receipt
from cafe.prompt_modal import PromptModal
from cafe.rendering import (
    format_line_label,
    render_feedback,
    render_main_menu,
    render_menu,
    render_options,
    render_receipt,
    render_report,
    render_selection_menu,
    topping_labels,
)

logger = logging.getLogger(__name__)


class _Cancelled(Exception):
    """The operator escaped out of a prompt."""


class CafeApp(App):
    """A Textual till for taking cafe orders, saving them and printing receipts."""

    TITLE = "Cafe Till"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 2fr;
        border: round $primary;
        padding: 1;
    }

    #summary-pane {
        width: 3fr;
        border: round $secondary;
        padding: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        config: CafeConfig,
        catalog: MenuCatalog | None = None,
        store: OrderStore | None = None,
        feedback: FeedbackLog | None = None,
    ) -> None:
        super().__init__()
        self.config = config
        self.catalog = catalog or load_catalog()
        self.store = store or OrderStore(config.order_log_path, config.order_id_base, config.currency)
        self.feedback = feedback or FeedbackLog(config.feedback_log_path)
        self.pricing = PricingEngine(config)
        self.builder = OrderBuilder(self.catalog, self.store.next_order_id)
        self.system_status = ""
        self.flow_active = False

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static("Main Menu", classes="pane-title")
                yield Static(render_main_menu(), id="main-menu")
            with Vertical(id="summary-pane"):
                yield Static("Today", classes="pane-title")
                yield Static(id="summary")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        self.sub_title = self.config.shop_name
        _, msg = check_printer_dependencies(self.config)
        self.system_status = msg
        logger.info("app_mounted printer_status=%r", msg)
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if len(self.screen_stack) > 1 or self.flow_active:
            return
        if not event.is_printable or not event.character:
            return

        handlers: dict[str, Callable[[], None]] = {
            "1": self.action_place_order,
            "2": self.action_view_menu,
            "3": self.action_view_reports,
            "4": self.action_feedback,
            "5": self.action_exit_till,
        }
        handler = handlers.get(event.character)
        if handler is None:
            self._set_status("Invalid option.")
        else:
            handler()
        event.stop()

    def action_place_order(self) -> None:
        self.flow_active = True
        self._take_order()

    def action_view_menu(self) -> None:
        self.push_screen(NoticeModal("Our Menu", render_menu(self.catalog, self.config.currency)))

    def action_view_reports(self) -> None:
        self.push_screen(NoticeModal("Reports", render_report(self.store, self.config)))

    def action_feedback(self) -> None:
        self.flow_active = True
        self._handle_feedback()

    def action_exit_till(self) -> None:
        logger.info("app_exit orders=%s", self.store.order_count())
        self.exit()

    @work(exclusive=True, group="flow")
    async def _take_order(self) -> None:
        try:
            order = await self._build_order()
            if order is None:
                self._set_status("Order cancelled")
                return
            if not await self._save_order(order):
                return
            await self.push_screen_wait(NoticeModal(f"Receipt #{order.order_id}", render_receipt(order, self.config)))
            self._print_receipt(order)
        finally:
            self.flow_active = False
            self._refresh_all()

    async def _build_order(self) -> Order | None:
        currency = self.config.currency
        try:
            name = await self._ask("Place New Order", "Enter customer name:", lambda raw: raw.strip())
            draft = self.builder.start_order(name)

            while True:
                count = self.catalog.size()
                index = await self._ask(
                    "Select Items",
                    f"Select item (1-{count}):",
                    lambda raw: parse_index(raw, count),
                    body=self._selection_body(),
                )
                quantity = await self._ask("Select Items", "Enter quantity:", parse_quantity)
                item = self.builder.add_line_item(index, quantity)

                while self.builder.state is OrderState.AWAITING_CUSTOMIZATION:
                    variants = self.builder.pending_variants()
                    if variants:
                        choice = await self._ask(
                            item.name,
                            "Select size:",
                            lambda raw: parse_index(raw, len(variants)),
                            body=render_options(variants),
                        )
                        self.builder.choose_variant(choice)
                        continue
                    toppings = self.builder.pending_toppings()
                    choice = await self._ask(
                        item.name,
                        f"Select topping (1-{len(toppings)}):",
                        lambda raw: parse_index(raw, len(toppings)),
                        body=render_options(topping_labels(toppings, currency)),
                    )
                    self.builder.choose_topping(choice)

                if not await self._ask("Select Items", "Add another item? (y/n):", parse_yes_no):
                    break

            self.builder.finish_items()
            donate = await self._ask(
                "Charity",
                f"Would you like to donate {format_money(self.config.donation_amount, currency)} "
                f"to {self.config.donation_cause}? (y/n):",
                parse_yes_no,
            )
            totals = self.pricing.compute_totals(draft, donate)
            payment_body = Text()
            payment_body.append(f"Total due: {format_money(totals.total, currency)}\n\n", style="bold")
            payment_body.append_text(render_options([method.label for method in PaymentMethod]))
            method = await self._ask("Payment", "Choice:", parse_payment_choice, body=payment_body)
            return self.pricing.set_payment_method(draft, totals, method)
        except _Cancelled:
            self.builder.cancel()
            return None

    async def _save_order(self, order: Order) -> bool:
        while True:
            try:
                self.store.persist(order)
            except PersistenceFailure as exc:
                logger.error("order_save_failed order_id=%s error=%s", order.order_id, exc)
                try:
                    retry = await self._ask(
                        "Save Failed",
                        "Retry saving? (y/n):",
                        parse_yes_no,
                        body=Text(str(exc), style="bold #ffb3b3"),
                    )
                except _Cancelled:
                    retry = False
                if not retry:
                    self._set_status(f"Order #{order.order_id} NOT saved: {exc}")
                    return False
                continue
            self._set_status(f"Saved order #{order.order_id}")
            return True

    def _print_receipt(self, order: Order) -> None:
        if not self.config.printer_enabled:
            return
        try:
            print_receipt(order, self.config)
        except Exception as exc:
            logger.error("receipt_print_failed order_id=%s error=%r", order.order_id, exc)
            self._set_status(f"Saved #{order.order_id} but print failed: {exc}")
            return
        self._set_status(f"Saved + printed: #{order.order_id}")

    @work(exclusive=True, group="flow")
    async def _handle_feedback(self) -> None:
        try:
            choice = await self._ask(
                "Feedback",
                "Choice:",
                lambda raw: parse_index(raw, len(FEEDBACK_MENU_OPTIONS)),
                body=render_options(FEEDBACK_MENU_OPTIONS),
            )
            if choice == 1:
                name = await self._ask("Feedback", "Name:", lambda raw: raw.strip())
                message = await self._ask("Feedback", "Feedback:", lambda raw: raw.strip())
                try:
                    self.feedback.append(name, message)
                except PersistenceFailure as exc:
                    logger.error("feedback_save_failed error=%s", exc)
                    await self.push_screen_wait(NoticeModal("Feedback", str(exc), error=True))
                    return
                self._set_status("Feedback Saved!")
                return

            try:
                lines = self.feedback.read_lines()
            except (NotFound, PersistenceFailure) as exc:
                await self.push_screen_wait(NoticeModal("Feedback", str(exc), error=True))
                return
            await self.push_screen_wait(NoticeModal("Feedback", render_feedback(lines)))
        except _Cancelled:
            return
        finally:
            self.flow_active = False
            self._refresh_all()

    async def _ask(self, title: str, prompt: str, parser: Callable[[str], Any], body: Text | None = None) -> Any:
        result = await self.push_screen_wait(PromptModal(title, prompt, parser, body=body))
        if result is None:
            raise _Cancelled()
        return result

    def _selection_body(self) -> Text:
        body = render_selection_menu(self.catalog, self.config.currency)
        draft = self.builder.draft
        if draft is not None and draft.items:
            body.append("\n\nIn this order:", style="bold")
            for line in draft.items:
                body.append("\n")
                body.append_text(format_line_label(line))
        return body

    def _set_status(self, message: str) -> None:
        self.system_status = message
        self._refresh_status()

    def _refresh_all(self) -> None:
        self._refresh_summary()
        self._refresh_status()

    def _refresh_summary(self) -> None:
        try:
            summary = self.query_one("#summary", Static)
        except NoMatches:
            return
        summary.update(render_report(self.store, self.config))

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        bar.update(f"Select an option (1-5). Ctrl+Q quits.\n{self.system_status or 'Ready'}")
