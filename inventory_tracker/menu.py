"""Text menu over an InventoryManager. All session state lives on the InventoryMenu instance."""

import logging
import sys
from typing import Optional, TextIO

from .errors import SkuSpaceExhaustedError
from .manager import InventoryManager
from .schemas import Product
from .utils import blank_to_none, parse_float, parse_int

logger = logging.getLogger(__name__)

INVALID_INPUT = "Invalid input. Try again."
NO_PRODUCTS = "No products found."

MAIN_MENU = (
    "========= Inventory Menu =========",
    "1. Add a product",
    "2. Remove a product",
    "3. Update quantity",
    "4. View inventory",
    "5. Search by SKU",
    "6. Filter inventory",
    "7. Sort inventory",
    "8. Save to file",
    "9. Load from file",
    "10. Export report",
    "11. Exit",
)

FILTER_MENU = (
    "Select filtering method",
    "1. Filter by Category",
    "2. Filter by Name",
    "3. Filter by Exact Price",
    "4. Filter by Price Range",
)

SORT_FIELD_MENU = (
    "Choose sorting method",
    "1. Name",
    "2. Price",
    "3. Category",
    "4. Quantity",
)


class InventoryMenu:
    def __init__(
        self,
        manager: InventoryManager,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.manager = manager
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.running = False

        self.actions = {
            1: self.add_product,
            2: self.remove_product,
            3: self.update_quantity,
            4: self.view_inventory,
            5: self.search_by_sku,
            6: self.filter_menu,
            7: self.sort_menu,
            8: self.save,
            9: self.load,
            10: self.export_report,
            11: self.stop,
        }

    # --- I/O helpers ---

    def say(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.stdout)

    def ask(self, prompt: str) -> str:
        """Prompts and returns the next input line. Raises EOFError when input runs out."""
        print(prompt, end="", file=self.stdout)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def show_products(self, products: list[Product]) -> None:
        if not products:
            self.say(NO_PRODUCTS)
            return
        self.say(*(str(product) for product in products))

    # --- Main loop ---

    def run(self) -> None:
        self.running = True
        while self.running:
            self.say(*MAIN_MENU)
            try:
                choice = parse_int(self.ask("Enter your choice: "))
                action = self.actions.get(choice)
                if action is None:
                    self.say("Invalid option. Try again.")
                    continue
                action()
            except EOFError:
                self.say("")
                self.stop()
            except ValueError:
                self.say(INVALID_INPUT)
            except SkuSpaceExhaustedError as e:
                logger.error(f"❌ {e}")

    def stop(self) -> None:
        self.running = False

    # --- Actions ---

    def prompt_for_product(self) -> Product:
        """
        Asks for product fields until every number parses. A blank SKU is auto-generated;
        a blank name or category is stored as missing, the same as a blank field on disk.
        """
        while True:
            try:
                name = blank_to_none(self.ask("Enter product name: ").strip())
                price = parse_float(self.ask("Enter product price: "))
                quantity = parse_int(self.ask("Enter product quantity: "))
                category = blank_to_none(self.ask("Enter product category: ").strip())
                sku = self.ask("Enter product sku (leave blank to auto-generate): ").strip()
            except ValueError:
                self.say("Invalid input. Please try again.")
                continue

            if not sku:
                return self.manager.create_product(name, quantity, price, category)
            return Product(sku=sku, name=name, quantity=quantity, price=price, category=category)

    def add_product(self) -> None:
        self.manager.add_product(self.prompt_for_product())

    def remove_product(self) -> None:
        sku = self.ask("Enter product sku: ").strip()
        self.manager.remove_product(sku)

    def update_quantity(self) -> None:
        sku = self.ask("Enter product sku: ").strip()
        quantity = parse_int(self.ask("Enter new quantity: "))
        self.manager.update_quantity(sku, quantity)

    def view_inventory(self) -> None:
        self.show_products(list(self.manager))

    def search_by_sku(self) -> None:
        sku = self.ask("Enter product sku: ").strip()
        product = self.manager.search_by_sku(sku)
        self.say(f"Found: {product}" if product else "Product not found.")

    def filter_menu(self) -> None:
        self.say(*FILTER_MENU)
        choice = parse_int(self.ask("Enter your choice: "))
        if choice == 1:
            category = self.ask("Enter Category: ").strip()
            self.show_products(self.manager.filter_by_category(category))
        elif choice == 2:
            name = self.ask("Enter Name: ").strip()
            self.show_products(self.manager.filter_by_name(name))
        elif choice == 3:
            price = parse_float(self.ask("Enter Exact Price: "))
            self.show_products(self.manager.filter_by_exact_price(price))
        elif choice == 4:
            min_price = parse_float(self.ask("Enter Minimum: "))
            max_price = parse_float(self.ask("Enter Maximum: "))
            self.show_products(self.manager.filter_by_price_range(min_price, max_price))
        else:
            self.say("Invalid input.")

    def ask_direction(self) -> bool:
        """Re-asks until the user picks 1 (ascending) or 2 (descending)."""
        while True:
            self.say("Ascending or descending: ", "1. Ascending", "2. Descending")
            try:
                choice = parse_int(self.ask("Enter your choice: "))
            except ValueError:
                self.say("Invalid number. Try again.")
                continue
            if choice == 1:
                return True
            if choice == 2:
                return False
            self.say("Invalid input")

    def sort_menu(self) -> None:
        sorters = {
            1: self.manager.sort_by_name,
            2: self.manager.sort_by_price,
            3: self.manager.sort_by_category,
            4: self.manager.sort_by_quantity,
        }
        while True:
            ascending = self.ask_direction()
            self.say(*SORT_FIELD_MENU)
            try:
                sorter = sorters.get(parse_int(self.ask("Enter your choice: ")))
                if sorter is None:
                    self.say("Invalid sorting method")
                else:
                    sorter(ascending)
            except ValueError:
                self.say(INVALID_INPUT)

            again = self.ask("Sort again? (y/n) ").strip()
            if again.lower() == "n":
                return

    def save(self) -> None:
        self.manager.save_to_file()

    def load(self) -> None:
        self.manager.load_from_file()

    def export_report(self) -> None:
        try:
            paths = self.manager.export_report()
        except OSError as e:
            logger.error(f"❌ Error exporting report: {e}")
            return
        for path in paths:
            self.say(f"Report written: {path}")
