from datetime import datetime
from typing import Optional


def normalize_sku(sku: str) -> str:
    """SKUs are stored and compared in uppercase."""
    return sku.upper()


def get_date_suffix_for_filename() -> str:
    """Returns the current date as a YYYY-MM-DD string for filenames."""
    return datetime.now().strftime("%Y-%m-%d")


def parse_int(text: str) -> int:
    """Parses free-form user text as an integer. Raises ValueError."""
    return int(text.strip())


def parse_float(text: str) -> float:
    """Parses free-form user text as a float. Raises ValueError."""
    return float(text.strip())


def blank_to_none(value: str) -> Optional[str]:
    """Empty persisted fields stand for a missing value."""
    return value if value != "" else None
