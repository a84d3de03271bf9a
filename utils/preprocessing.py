# utils/preprocessing.py
import logging
from typing import List, Optional, Tuple

import pandas as pd

from services.models import REFERENCE_HEADERS, TariffEntry

logger = logging.getLogger(__name__)


def _clean_field(value: str) -> str:
    return value.replace('"', "").strip()


def parse_reference_csv(csv_text: str) -> pd.DataFrame:
    """
    Parse the flat HTS reference CSV into a DataFrame of strings / None.

    Each line is split on every comma and each field has its quote characters
    and surrounding whitespace removed. Commas inside quoted fields are NOT
    supported; reference fields are assumed to be free of delimiters.
    Short lines are padded with None, and empty fields become None.
    """
    lines = csv_text.split("\n")
    headers = [_clean_field(h) for h in lines[0].split(",")]

    missing = [h for h in REFERENCE_HEADERS if h not in headers]
    if missing:
        logger.warning("Reference table header is missing expected columns: %s", missing)

    records = []
    for line in lines[1:]:
        values = [_clean_field(v) for v in line.split(",")]
        record = {}
        for index, header in enumerate(headers):
            value: Optional[str] = values[index] if index < len(values) else None
            record[header] = value or None
        records.append(record)

    return pd.DataFrame(records, columns=headers, dtype=object)


def usable_rows(df: pd.DataFrame) -> pd.DataFrame:
    """Keep only rows that have both an HTS number and a description."""
    if df.empty or "HTS Number" not in df.columns or "Description" not in df.columns:
        return df.iloc[0:0]
    return df[df["HTS Number"].notna() & df["Description"].notna()]


def to_entries(df: pd.DataFrame) -> Tuple[TariffEntry, ...]:
    records: List[dict] = df.astype(object).where(df.notna(), None).to_dict("records")
    return tuple(TariffEntry.from_record(r) for r in records)
