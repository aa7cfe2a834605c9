"""
Flat-file codec for the inventory.

One product per line, five comma-separated fields in fixed order:
sku,name,quantity,price,category. There is no header and no escaping, so a
comma inside a field breaks that line (and only that line) on load.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

from . import settings
from .errors import RecordFormatError
from .schemas import Product
from .utils import blank_to_none

logger = logging.getLogger(__name__)

# Quantities are an optional sign and ASCII digits only, with no spaces or underscores.
# Prices may carry surrounding whitespace, an exponent, a d/f suffix, NaN or Infinity.
INT_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(
    r"[+-]?(NaN|Infinity|([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?[fFdD]?)"
)
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _field(value: Optional[object]) -> str:
    return "" if value is None else str(value)


def format_line(product: Product) -> str:
    """Encodes a product as a single line, without the line terminator."""
    return settings.FIELD_SEPARATOR.join(
        [
            _field(product.sku),
            _field(product.name),
            _field(product.quantity),
            _field(product.price),
            _field(product.category),
        ]
    )


def parse_quantity(text: str) -> int:
    if not INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid quantity: {text!r}")
    return int(text)


def parse_price(text: str) -> float:
    text = text.strip()
    if not FLOAT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid price: {text!r}")
    return float(text.rstrip("fFdD"))


def parse_line(line_number: int, raw: str) -> Product:
    """
    Decodes one line into a Product.
    Raises RecordFormatError on a wrong field count or an unparseable number.
    """
    parts = raw.split(settings.FIELD_SEPARATOR)
    if len(parts) != settings.RECORD_FIELD_COUNT:
        raise RecordFormatError(line_number, raw, "is not formatted correctly")

    sku, name, quantity_text, price_text, category = parts
    try:
        quantity = parse_quantity(quantity_text)
        price = parse_price(price_text)
    except ValueError as e:
        raise RecordFormatError(line_number, raw, "has invalid number format") from e

    return Product(
        sku=sku,
        name=blank_to_none(name),
        quantity=quantity,
        price=price,
        category=blank_to_none(category),
    )


def write_inventory(path: Path, products: Iterable[Product]) -> int:
    """Overwrites `path` with one line per product. Returns the number of lines written."""
    count = 0
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for product in products:
            f.write(format_line(product) + "\n")
            count += 1
    return count


def read_text(path: Path) -> str:
    """
    Reads the whole file, trying UTF-8 (BOM tolerated) first and falling back to latin-1.
    OSError propagates to the caller.
    """
    data = Path(path).read_bytes()
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.info(f"INFO: UTF-8 decoding failed for {Path(path).name}. Retrying with 'latin-1'.")
        # latin-1 maps every byte, so this cannot fail.
        return data.decode("latin-1")


def split_lines(text: str) -> list[str]:
    """Splits on \\n, \\r\\n or a lone \\r. A final line terminator does not start a new line."""
    lines = LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def read_inventory(path: Path) -> tuple[list[Product], list[RecordFormatError]]:
    """
    Parses every line of `path`. Malformed lines are collected, not raised,
    so one bad line never stops the rest of the file from loading.
    """
    products: list[Product] = []
    errors: list[RecordFormatError] = []

    for line_number, raw in enumerate(split_lines(read_text(path)), start=1):
        try:
            products.append(parse_line(line_number, raw))
        except RecordFormatError as e:
            errors.append(e)

    return products, errors
