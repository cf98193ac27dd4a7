"""Schema validation for floor schedules and manual dimension entry."""

import math
from dataclasses import dataclass, field
from typing import List
import pandas as pd

from data.loader import LENGTH_COLUMN, WIDTH_COLUMN


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


FLOOR_REQUIRED_COLUMNS = [LENGTH_COLUMN, WIDTH_COLUMN]

LARGE_FLOOR_AREA_M2 = 50000


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_floors(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, FLOOR_REQUIRED_COLUMNS, "Floor Schedule")
    if not result.is_valid:
        return result

    for col in FLOOR_REQUIRED_COLUMNS:
        values = pd.to_numeric(df[col], errors="coerce")
        bad_rows = [i + 1 for i, v in enumerate(values) if pd.isna(v) or not math.isfinite(v) or v <= 0]
        if bad_rows:
            result.is_valid = False
            result.errors.append(f"Floor Schedule: {col} must be a positive number (rows {bad_rows}).")

    if result.is_valid:
        areas = pd.to_numeric(df[LENGTH_COLUMN]) * pd.to_numeric(df[WIDTH_COLUMN])
        large = [i + 1 for i, a in enumerate(areas) if a > LARGE_FLOOR_AREA_M2]
        if large:
            result.warnings.append(
                f"Floor Schedule: rows {large} exceed {LARGE_FLOOR_AREA_M2:,} m2. Check the units are meters."
            )
    return result


def validate_dimensions(length, width) -> ValidationResult:
    """Check a manually entered floor length and width."""
    result = ValidationResult()
    for label, value in (("Length", length), ("Width", width)):
        try:
            number = float(value)
        except (TypeError, ValueError):
            result.is_valid = False
            result.errors.append(f"{label} must be a number.")
            continue
        if not math.isfinite(number) or number <= 0:
            result.is_valid = False
            result.errors.append(f"{label} must be greater than 0.")
    return result
