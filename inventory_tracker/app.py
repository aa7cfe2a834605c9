import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from . import settings
from .logger import setup_logger
from .manager import InventoryManager
from .menu import InventoryMenu


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Interactive in-memory inventory tracker with flat-file persistence."
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=settings.INVENTORY_FILE,
        help=f"Inventory file used by save/load (default: {settings.INVENTORY_FILE}).",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Console and file log level.",
    )
    parser.add_argument(
        "--load",
        action="store_true",
        help="Load the inventory file before showing the menu.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: configures logging, builds the manager and runs the menu until exit."""
    args = parse_args(argv)
    logger = setup_logger("inventory_tracker", log_level=getattr(logging, args.log_level))

    manager = InventoryManager(inventory_file=args.file)
    if args.load:
        manager.load_from_file()

    logger.debug(f"Using inventory file: {manager.inventory_file}")
    InventoryMenu(manager).run()
    logger.info("--- Goodbye ---")
    return 0
