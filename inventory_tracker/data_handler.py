import json
import logging
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from . import settings
from . import utils
from .schemas import Product

logger = logging.getLogger(__name__)


def build_report_frame(products: Iterable[Product]) -> pd.DataFrame:
    """One row per product, columns in Product field order, headers taken from the aliases."""
    columns = [info.alias or name for name, info in Product.model_fields.items()]
    rows = [product.model_dump(by_alias=True) for product in products]
    return pd.DataFrame(rows, columns=columns)


def save_report(
    products: Iterable[Product],
    output_dir: Optional[Path] = None,
    save_json: Optional[bool] = None,
) -> list[Path]:
    """Saves the inventory to a dated CSV report and conditionally to JSON. Returns the written paths."""
    products = list(products)
    output_dir = Path(output_dir) if output_dir is not None else settings.OUTPUT_DIR
    save_json = settings.SAVE_JSON_OUTPUT if save_json is None else save_json

    output_dir.mkdir(parents=True, exist_ok=True)
    date_suffix = utils.get_date_suffix_for_filename()

    csv_path = output_dir / f"{settings.REPORT_FILENAME_BASE}_{date_suffix}.csv"
    json_path = output_dir / f"{settings.REPORT_FILENAME_BASE}_{date_suffix}.json"

    df = build_report_frame(products)
    df.to_csv(csv_path, index=False)
    logger.info(f"✅ Inventory report saved to: {csv_path}")
    written = [csv_path]

    if save_json:
        with open(json_path, "w", encoding="utf-8") as f:
            json_data = [item.model_dump(mode="json", by_alias=True) for item in products]
            json.dump(json_data, f, indent=2)
        logger.info(f"✅ JSON output saved to: {json_path}")
        written.append(json_path)
    else:
        logger.info("INFO: Skipping JSON file save as per configuration.")

    return written
