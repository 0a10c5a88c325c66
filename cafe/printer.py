"""ESC/POS receipt printing over USB."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from cafe.config import PRINTER_FONT_SIZE, PRINTER_LEFT_INDENT_PX, PRINTER_WIDTH_PX, CafeConfig
from cafe.models import Order
from cafe.rendering import receipt_lines

logger = logging.getLogger(__name__)

# Separator tuning values.
_SECTION_SEPARATOR_HEIGHT_PX = 12
_SECTION_SEPARATOR_THICKNESS_PX = 3
_LINE_PADDING_PX = 6
_TAIL_SPACER_PX = 70
_FONT_OVERRIDE_ENV = "RECEIPT_PRINTER_FONT_PATH"
_LINUX_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/liberation/LiberationMono-Regular.ttf",
)


def resolve_printer_font_path(config: CafeConfig) -> str:
    """
    Resolve a printer font path.

    Resolution order:
    1. RECEIPT_PRINTER_FONT_PATH (if set)
    2. config.printer_font_path
    3. Known Linux fallbacks
    """
    env_override = os.environ.get(_FONT_OVERRIDE_ENV, "").strip()
    candidates: list[str] = []
    if env_override:
        candidates.append(env_override)
    candidates.append(config.printer_font_path)
    candidates.extend(_LINUX_FONT_FALLBACKS)

    seen: list[str] = []
    for candidate in candidates:
        if not candidate or candidate in seen:
            continue
        seen.append(candidate)
        if Path(candidate).is_file():
            return candidate

    raise RuntimeError(
        f"No usable printer font found. Set {_FONT_OVERRIDE_ENV} to a valid .ttf/.otf file. "
        f"Tried: {', '.join(seen)}"
    )


def check_printer_dependencies(config: CafeConfig) -> tuple[bool, str]:
    """Check whether printing is enabled and its dependencies are usable."""
    if not config.printer_enabled:
        return (False, "Printer disabled")
    try:
        from escpos.printer import Usb  # noqa: F401
        from PIL import ImageFont

        font_path = resolve_printer_font_path(config)
        ImageFont.truetype(font_path, PRINTER_FONT_SIZE)
    except Exception as exc:
        return (False, f"Printer deps unavailable: {exc}")
    return (True, "Printer ready")


def _render_line(text: str, font: object) -> object:
    from PIL import Image, ImageDraw

    probe = Image.new("1", (1, 1), color=1)
    probe_draw = ImageDraw.Draw(probe)
    bbox = probe_draw.textbbox((0, 0), text or " ", font=font)
    text_height = bbox[3] - bbox[1]
    canvas_height = max(PRINTER_FONT_SIZE, text_height) + _LINE_PADDING_PX

    img = Image.new("1", (PRINTER_WIDTH_PX, canvas_height), color=1)
    draw = ImageDraw.Draw(img)
    # Offset by bbox top so descenders are not clipped.
    y = (canvas_height - text_height) // 2 - bbox[1]
    draw.text((PRINTER_LEFT_INDENT_PX, y), text, font=font, fill=0)
    return img


def _render_spacer(height_px: int) -> object:
    from PIL import Image

    return Image.new("1", (PRINTER_WIDTH_PX, max(1, height_px)), color=1)


def _render_section_separator() -> object:
    from PIL import Image, ImageDraw

    img = Image.new("1", (PRINTER_WIDTH_PX, _SECTION_SEPARATOR_HEIGHT_PX), color=1)
    draw = ImageDraw.Draw(img)
    top = max(0, (_SECTION_SEPARATOR_HEIGHT_PX - _SECTION_SEPARATOR_THICKNESS_PX) // 2)
    bottom = min(_SECTION_SEPARATOR_HEIGHT_PX - 1, top + _SECTION_SEPARATOR_THICKNESS_PX - 1)
    draw.rectangle((0, top, PRINTER_WIDTH_PX - 1, bottom), fill=0)
    return img


def _is_rule(line: str) -> bool:
    return bool(line) and set(line) == {"-"}


def print_receipt(order: Order, config: CafeConfig) -> None:
    """Print the receipt for a saved order and cut the ticket."""
    try:
        from escpos.printer import Usb
        from PIL import ImageFont
    except Exception as exc:
        raise RuntimeError(f"Printer dependencies unavailable: {exc}") from exc

    printer = Usb(config.printer_usb_vendor_id, config.printer_usb_product_id)
    font = ImageFont.truetype(resolve_printer_font_path(config), PRINTER_FONT_SIZE)

    for line in receipt_lines(order, config):
        if _is_rule(line):
            printer.image(_render_section_separator())
            continue
        printer.image(_render_line(line, font))

    printer.image(_render_spacer(_TAIL_SPACER_PX))
    printer.cut()
    logger.info("receipt_printed order_id=%s", order.order_id)
