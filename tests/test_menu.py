"""Tests for the interactive menu, driven through in-memory streams."""

import io
import random
import tempfile
import unittest
from pathlib import Path

from inventory_tracker.manager import InventoryManager
from inventory_tracker.menu import INVALID_INPUT, NO_PRODUCTS, InventoryMenu
from inventory_tracker.schemas import Product


def run_menu(manager, *lines):
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    stdout = io.StringIO()
    InventoryMenu(manager, stdin=stdin, stdout=stdout).run()
    return stdout.getvalue()


class MenuTests(unittest.TestCase):
    def setUp(self):
        self.manager = InventoryManager(rng=random.Random(3))

    def test_add_with_explicit_sku_then_exit(self):
        run_menu(self.manager, "1", "Keyboard", "29.99", "10", "Electronics", "a123", "11")

        product = self.manager.search_by_sku("A123")
        self.assertIsNotNone(product)
        self.assertEqual((product.name, product.quantity, product.price), ("Keyboard", 10, 29.99))

    def test_add_with_blank_sku_generates_one(self):
        run_menu(self.manager, "1", "Laptop", "999.99", "5", "Electronics", "", "11")

        self.assertEqual(len(self.manager), 1)
        self.assertRegex(self.manager.products[0].sku, r"^[A-Z]\d{3}$")

    def test_add_reprompts_on_bad_number(self):
        output = run_menu(
            self.manager,
            "1", "Mouse", "cheap",
            "Mouse", "15.99", "5", "Electronics", "B456",
            "11",
        )

        self.assertIn("Invalid input. Please try again.", output)
        self.assertEqual([p.sku for p in self.manager], ["B456"])

    def test_invalid_main_choice_keeps_state(self):
        output = run_menu(self.manager, "abc", "42", "11")

        self.assertIn(INVALID_INPUT, output)
        self.assertIn("Invalid option. Try again.", output)
        self.assertEqual(len(self.manager), 0)

    def test_end_of_input_exits(self):
        output = run_menu(self.manager)
        self.assertIn("Inventory Menu", output)

    def test_view_and_search(self):
        self.manager.add_product(Product(sku="A1", name="Mug", quantity=2, price=4.5, category="Kitchen"))

        output = run_menu(self.manager, "4", "5", "a1", "5", "zz", "11")

        self.assertIn("Product{SKU='A1', Name='Mug'", output)
        self.assertIn("Found: Product{SKU='A1'", output)
        self.assertIn("Product not found.", output)

    def test_update_quantity_and_remove(self):
        self.manager.add_product(Product(sku="A1", name="Mug", quantity=2, price=4.5))

        run_menu(self.manager, "3", "A1", "9", "3", "A1", "-4", "11")
        self.assertEqual(self.manager.products[0].quantity, 9)

        run_menu(self.manager, "2", "a1", "11")
        self.assertEqual(len(self.manager), 0)

    def test_filter_menu(self):
        self.manager.add_product(Product(sku="A1", name="Mug", quantity=2, price=4.5, category="Kitchen"))
        self.manager.add_product(Product(sku="A2", name="Pan", quantity=1, price=20.0, category="Kitchen"))

        output = run_menu(
            self.manager,
            "6", "1", "kitchen",
            "6", "4", "10", "1",
            "6", "3", "x",
            "11",
        )

        self.assertIn("Product{SKU='A2'", output)
        self.assertIn(NO_PRODUCTS, output)
        self.assertIn(INVALID_INPUT, output)

    def test_sort_menu_repeats_until_n(self):
        for sku, price in (("A1", 3.0), ("A2", 1.0), ("A3", 2.0)):
            self.manager.add_product(Product(sku=sku, name=sku, quantity=1, price=price))

        run_menu(self.manager, "7", "9", "2", "2", "y", "1", "4", "n", "11")

        # Descending by price, then ascending by quantity (all tied, order kept).
        self.assertEqual([p.sku for p in self.manager], ["A1", "A3", "A2"])

    def test_save_and_load(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "inventory.txt"
            manager = InventoryManager(inventory_file=path)
            manager.add_product(Product(sku="A1", name="Mug", quantity=2, price=4.5, category="Kitchen"))

            run_menu(manager, "8", "9", "11")

            self.assertTrue(path.exists())
            self.assertEqual(len(manager), 2)

    def test_blank_name_and_category_survive_save_and_load(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            manager = InventoryManager(inventory_file=Path(temp_dir) / "inventory.txt")
            run_menu(manager, "1", "Mug", "4.5", "2", "", "A1", "1", "", "3", "1", "Tools", "B2", "11")
            expected = [p.model_dump() for p in manager]

            manager.save_to_file()
            manager.clear_inventory()
            manager.load_from_file()

        self.assertIsNone(expected[0]["category"])
        self.assertIsNone(expected[1]["name"])
        self.assertEqual([p.model_dump() for p in manager], expected)


if __name__ == "__main__":
    unittest.main()
