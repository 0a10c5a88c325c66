import asyncio

from cafe.cafe_app import CafeApp
from cafe.config import CafeConfig
from cafe.models import OrderState
from cafe.notice_modal import NoticeModal
from cafe.persistence import RECORD_SEPARATOR
from cafe.prompt_modal import PromptModal


async def _wait_for(pilot, app, screen_type, previous=None):
    for _ in range(100):
        screen = app.screen
        if isinstance(screen, screen_type) and screen is not previous:
            await pilot.pause()
            return screen
        await pilot.pause(0.02)
    raise AssertionError(f"{screen_type.__name__} did not appear")


async def _answer(pilot, app, text, previous=None):
    screen = await _wait_for(pilot, app, PromptModal, previous)
    await pilot.press(*text, "enter")
    await pilot.pause()
    return screen


async def _wait_idle(pilot, app):
    for _ in range(100):
        if not app.flow_active:
            return
        await pilot.pause(0.02)
    raise AssertionError("flow did not finish")


def test_place_order_end_to_end(config):
    async def scenario():
        app = CafeApp(config)
        async with app.run_test() as pilot:
            await pilot.press("1")
            prompt = await _answer(pilot, app, "ali")
            prompt = await _answer(pilot, app, "1", prompt)

            prompt = await _answer(pilot, app, "x", prompt)
            assert app.screen is prompt
            assert prompt.error == "Invalid input. Please enter a number."
            await pilot.press("2", "enter")
            await pilot.pause()

            prompt = await _answer(pilot, app, "1", prompt)  # Single Scoop
            prompt = await _answer(pilot, app, "7", prompt)  # No Topping
            prompt = await _answer(pilot, app, "n", prompt)  # no more items
            prompt = await _answer(pilot, app, "n", prompt)  # no donation

            prompt = await _answer(pilot, app, "4", prompt)
            assert app.screen is prompt
            assert prompt.error == "Invalid payment choice! Choose 1-3."
            await pilot.press("1", "enter")

            receipt = await _wait_for(pilot, app, NoticeModal)
            assert receipt.title_text == "Receipt #1001"
            assert app.store.order_count() == 1
            [order] = app.store.orders()
            assert order.customer_name == "ali"
            assert str(order.total) == "226.00"
            assert order.payment_method.label == "Cash"

            await pilot.press("escape")
            await _wait_idle(pilot, app)
            assert app.system_status == "Saved order #1001"

        assert "Total: Rs.226.00" in config.order_log_path.read_text(encoding="utf-8")

    asyncio.run(scenario())


def test_escape_cancels_order(config):
    async def scenario():
        app = CafeApp(config)
        async with app.run_test() as pilot:
            await pilot.press("1")
            prompt = await _answer(pilot, app, "ali")
            await _wait_for(pilot, app, PromptModal, prompt)
            await pilot.press("escape")
            await _wait_idle(pilot, app)
            assert app.system_status == "Order cancelled"
            assert app.builder.state is OrderState.EMPTY
            assert app.store.order_count() == 0

    asyncio.run(scenario())


def test_failed_save_is_reported(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    config = CafeConfig(data_dir=blocker)

    async def scenario():
        app = CafeApp(config)
        async with app.run_test() as pilot:
            await pilot.press("1")
            prompt = None
            for answer in ("sara", "8", "1", "2", "n", "y", "3"):  # Coffee x1, Cold, donate, Online
                prompt = await _answer(pilot, app, answer, prompt)
            save_prompt = await _wait_for(pilot, app, PromptModal, prompt)
            assert save_prompt.title_text == "Save Failed"
            await pilot.press("n", "enter")
            await _wait_idle(pilot, app)
            assert app.store.order_count() == 0
            assert app.system_status.startswith("Order #1001 NOT saved")

    asyncio.run(scenario())


def test_retry_after_failed_save_saves_once(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    config = CafeConfig(data_dir=blocker)

    async def scenario():
        app = CafeApp(config)
        async with app.run_test() as pilot:
            await pilot.press("1")
            prompt = None
            for answer in ("sara", "8", "1", "2", "n", "n", "2"):  # Coffee x1, Cold, no donation, Card
                prompt = await _answer(pilot, app, answer, prompt)
            save_prompt = await _wait_for(pilot, app, PromptModal, prompt)
            assert save_prompt.title_text == "Save Failed"
            assert app.store.order_count() == 0

            blocker.unlink()
            await pilot.press("y", "enter")
            receipt = await _wait_for(pilot, app, NoticeModal)
            assert receipt.title_text == "Receipt #1001"
            assert app.store.order_count() == 1

            await pilot.press("escape")
            await _wait_idle(pilot, app)
            assert app.system_status == "Saved order #1001"

        text = config.order_log_path.read_text(encoding="utf-8")
        assert text.count("Order ID: 1001") == 1
        assert text.count(RECORD_SEPARATOR) == 1
        assert "Total: Rs.169.50" in text

    asyncio.run(scenario())


def test_main_menu_views_and_invalid_option(config):
    async def scenario():
        app = CafeApp(config)
        async with app.run_test() as pilot:
            await pilot.press("9")
            await pilot.pause()
            assert app.system_status == "Invalid option."

            await pilot.press("2")
            menu = await _wait_for(pilot, app, NoticeModal)
            assert menu.title_text == "Our Menu"
            await pilot.press("escape")
            await pilot.pause()
            assert not isinstance(app.screen, NoticeModal)

            await pilot.press("4")
            await _answer(pilot, app, "2")
            notice = await _wait_for(pilot, app, NoticeModal)
            assert notice.body == "No feedback found."
            await pilot.press("enter")
            await _wait_idle(pilot, app)

    asyncio.run(scenario())
