import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
# The working directory, not the package location: an installed package lives in
# site-packages, which is no place for inventory files, reports or logs.
BASE_DIR = Path.cwd()

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")


def resolve_path(value: str) -> Path:
    """Relative paths resolve against BASE_DIR; absolute paths are kept as given."""
    path = Path(value).expanduser()
    return path if path.is_absolute() else BASE_DIR / path


# --- Path Configuration ---
INVENTORY_FILE = resolve_path(os.getenv("INVENTORY_FILE", "inventory.txt"))
OUTPUT_DIR = resolve_path(os.getenv("OUTPUT_DIR", "output"))
LOG_DIR = resolve_path(os.getenv("LOG_DIR", "logs"))

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILENAME = os.getenv("LOG_FILENAME", "inventory.log")
LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024)))  # 5 MB
LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "3"))

# --- Report Output ---
REPORT_FILENAME_BASE = os.getenv("REPORT_FILENAME_BASE", "inventory_report")
SAVE_JSON_OUTPUT = os.getenv("SAVE_JSON_OUTPUT", "false").lower() in ("1", "true", "yes")

# --- SKU Generation ---
# SKUs are one uppercase letter followed by three digits.
SKU_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SKU_DIGITS = 3
SKU_SPACE_SIZE = len(SKU_LETTERS) * 10**SKU_DIGITS
SKU_MAX_ATTEMPTS = int(os.getenv("SKU_MAX_ATTEMPTS", "100000"))

# --- Flat File Format ---
FIELD_SEPARATOR = ","
RECORD_FIELD_COUNT = 5
