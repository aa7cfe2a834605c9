"""
Core inventory operations: add, remove, update, search, filter, sort and persist.

The manager owns an ordered list of Products and performs plain linear scans
over it. Expected conditions (duplicate SKU, unknown SKU, negative quantity,
unreadable file) are logged and reported through OperationResult / LoadResult
instead of being raised.
"""

import logging
import random
import re
import sys
from pathlib import Path
from typing import Iterator, Optional, TextIO

from . import data_handler, settings, storage
from .errors import SkuSpaceExhaustedError
from .schemas import LoadResult, OperationResult, OperationStatus, Product, SkippedLine
from .utils import normalize_sku

logger = logging.getLogger(__name__)

SKU_PATTERN = re.compile(rf"[{settings.SKU_LETTERS}]\d{{{settings.SKU_DIGITS}}}")


class InventoryManager:
    """Holds the product list and every operation performed on it."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_sku_attempts: int = settings.SKU_MAX_ATTEMPTS,
        inventory_file: Optional[Path] = None,
    ):
        self._inventory: list[Product] = []
        self._random = rng or random.Random()
        self.max_sku_attempts = max_sku_attempts
        self.inventory_file = Path(inventory_file) if inventory_file else settings.INVENTORY_FILE

    def __len__(self) -> int:
        return len(self._inventory)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._inventory)

    @property
    def products(self) -> tuple[Product, ...]:
        """Snapshot of the inventory in its current order."""
        return tuple(self._inventory)

    # --- Creation & Mutation ---

    def create_product(
        self, name: Optional[str], quantity: int, price: float, category: Optional[str]
    ) -> Product:
        """Builds a Product with a freshly generated SKU. The product is NOT added."""
        sku = self.generate_unique_sku()
        return Product(sku=sku, name=name, quantity=quantity, price=price, category=category)

    def add_product(self, product: Product) -> OperationResult:
        new_sku = product.sku
        for existing in self._inventory:
            if existing.sku == new_sku:
                message = f"Product with SKU {new_sku} already exists."
                logger.warning(f"⚠️ {message}")
                return OperationResult(
                    status=OperationStatus.CONFLICT, message=message, product=existing
                )

        self._inventory.append(product)
        message = f"Product with SKU {new_sku} added."
        logger.info(f"✅ {message}")
        return OperationResult(status=OperationStatus.SUCCESS, message=message, product=product)

    def remove_product(self, sku: str) -> OperationResult:
        sku = normalize_sku(sku)
        for index, product in enumerate(self._inventory):
            if product.sku == sku:
                del self._inventory[index]
                message = f"Product with SKU {sku} removed."
                logger.info(f"✅ {message}")
                return OperationResult(
                    status=OperationStatus.SUCCESS, message=message, product=product
                )

        return self._not_found(sku)

    def update_quantity(self, sku: str, new_qty: int) -> OperationResult:
        if new_qty < 0:
            message = "Quantity cannot be less than 0."
            logger.warning(f"⚠️ {message}")
            return OperationResult(status=OperationStatus.INVALID_INPUT, message=message)

        sku = normalize_sku(sku)
        for product in self._inventory:
            if product.sku == sku:
                product.quantity = new_qty
                message = f"Updated: {product.name} quantity to {new_qty}."
                logger.info(f"✅ {message}")
                return OperationResult(
                    status=OperationStatus.SUCCESS, message=message, product=product
                )

        return self._not_found(sku)

    def clear_inventory(self) -> None:
        self._inventory.clear()
        logger.info("Inventory cleared.")

    def _not_found(self, sku: str) -> OperationResult:
        message = f"No product with SKU {sku} found."
        logger.warning(f"⚠️ {message}")
        return OperationResult(status=OperationStatus.NOT_FOUND, message=message)

    # --- Lookup & Filtering ---

    def search_by_sku(self, sku: str) -> Optional[Product]:
        """Returns the product whose SKU matches (case-insensitively), or None."""
        sku = normalize_sku(sku)
        for product in self._inventory:
            if product.sku == sku:
                return product
        return None

    def filter_by_name(self, query: str) -> list[Product]:
        """Case-insensitive substring match on name. Products without a name never match."""
        query = query.lower()
        return [
            product
            for product in self._inventory
            if product.name is not None and query in product.name.lower()
        ]

    def filter_by_category(self, query: str) -> list[Product]:
        """Case-insensitive exact match on category. Products without a category never match."""
        query = query.lower()
        return [
            product
            for product in self._inventory
            if product.category is not None and product.category.lower() == query
        ]

    def filter_by_exact_price(self, query: float) -> list[Product]:
        # Exact float equality, no tolerance.
        return [product for product in self._inventory if product.price == query]

    def filter_by_price_range(self, min_price: float, max_price: float) -> list[Product]:
        """Inclusive on both ends. An inverted range matches nothing."""
        if min_price > max_price:
            return []
        return [
            product
            for product in self._inventory
            if min_price <= product.price <= max_price
        ]

    # --- Display ---

    def format_all_products(self) -> list[str]:
        return [str(product) for product in self._inventory]

    def print_all_products(self, out: Optional[TextIO] = None) -> None:
        out = out or sys.stdout
        for line in self.format_all_products():
            print(line, file=out)

    # --- SKU Generation ---

    def generate_unique_sku(self) -> str:
        """
        Draws random SKUs (one letter, three digits) until one is not already stored.
        Raises SkuSpaceExhaustedError when every SKU is taken or the attempt limit runs out.
        """
        existing = {product.sku for product in self._inventory}
        in_use = sum(1 for sku in existing if SKU_PATTERN.fullmatch(sku))
        if in_use >= settings.SKU_SPACE_SIZE:
            raise SkuSpaceExhaustedError(
                f"All {settings.SKU_SPACE_SIZE} SKUs are already in use."
            )

        for _ in range(self.max_sku_attempts):
            letter = self._random.choice(settings.SKU_LETTERS)
            digits = "".join(
                str(self._random.randrange(10)) for _ in range(settings.SKU_DIGITS)
            )
            candidate = letter + digits
            if candidate not in existing:
                return candidate

        raise SkuSpaceExhaustedError(
            f"No unused SKU found after {self.max_sku_attempts} attempts."
        )

    # --- Sorting ---
    # Descending order is the ascending result reversed as a whole, so products
    # that compare equal end up in reverse insertion order.

    def _sort(self, key, ascending: bool) -> None:
        if not self._inventory:
            return
        self._inventory.sort(key=key)
        if not ascending:
            self._inventory.reverse()

    @staticmethod
    def _text_key(value: Optional[str]) -> tuple[bool, str]:
        # Missing values sort before any text.
        return (value is not None, value.lower() if value is not None else "")

    def sort_by_name(self, ascending: bool = True) -> None:
        self._sort(lambda product: self._text_key(product.name), ascending)

    def sort_by_price(self, ascending: bool = True) -> None:
        self._sort(lambda product: product.price, ascending)

    def sort_by_category(self, ascending: bool = True) -> None:
        self._sort(lambda product: self._text_key(product.category), ascending)

    def sort_by_quantity(self, ascending: bool = True) -> None:
        self._sort(lambda product: product.quantity, ascending)

    # --- Persistence ---

    def save_to_file(self, path: Optional[Path] = None) -> OperationResult:
        """Overwrites the inventory file with the current list, in current order."""
        path = Path(path) if path else self.inventory_file
        try:
            count = storage.write_inventory(path, self._inventory)
        except OSError as e:
            message = f"Error saving inventory: {e}"
            logger.error(f"❌ {message}")
            return OperationResult(status=OperationStatus.IO_FAILURE, message=message)

        message = f"Inventory saved successfully ({count} products) to {path}."
        logger.info(f"✅ {message}")
        return OperationResult(status=OperationStatus.SUCCESS, message=message)

    def load_from_file(self, path: Optional[Path] = None) -> LoadResult:
        """
        Appends every well-formed line of the inventory file to the current list.
        Loading is additive and does not check SKU uniqueness.
        """
        path = Path(path) if path else self.inventory_file
        try:
            products, errors = storage.read_inventory(path)
        except OSError as e:
            message = f"Error loading inventory: {e}"
            logger.error(f"❌ {message}")
            return LoadResult(status=OperationStatus.IO_FAILURE, message=message)

        skipped = []
        for error in errors:
            logger.warning(f"⚠️ {error}")
            skipped.append(
                SkippedLine(line_number=error.line_number, raw=error.raw, reason=error.reason)
            )

        self._inventory.extend(products)
        message = f"Inventory loaded successfully ({len(products)} loaded, {len(skipped)} skipped)."
        logger.info(f"✅ {message}")
        return LoadResult(
            status=OperationStatus.SUCCESS,
            message=message,
            loaded=len(products),
            skipped=skipped,
        )

    def export_report(self, output_dir: Optional[Path] = None) -> list[Path]:
        """Writes a dated CSV (and optionally JSON) report of the current inventory."""
        return data_handler.save_report(self._inventory, output_dir)
