"""Floor schedule parsing: CSV/XLSX into Floor lists and back."""

import pandas as pd
from typing import List
from models.building import Floor
from models.occupancy import OccupancyType
from engine.calculations import make_floor

LENGTH_COLUMN = "Length (m)"
WIDTH_COLUMN = "Width (m)"


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


def parse_floors(df: pd.DataFrame, occupancy_type: OccupancyType) -> List[Floor]:
    """Convert a floor schedule into Floor objects numbered 1..n in row order."""
    floors = []
    for idx, (_, row) in enumerate(df.iterrows(), 1):
        floors.append(make_floor(
            str(idx),
            float(row[LENGTH_COLUMN]),
            float(row[WIDTH_COLUMN]),
            occupancy_type,
        ))
    return floors


def floors_to_df(floors: List[Floor]) -> pd.DataFrame:
    """Export floors with their derived area and occupant load."""
    return pd.DataFrame([
        {
            "Floor": f.floor_id,
            LENGTH_COLUMN: f.length,
            WIDTH_COLUMN: f.width,
            "Area (m2)": round(f.area, 2),
            "Occupant Load": f.occupant_load,
        }
        for f in floors
    ], columns=["Floor", LENGTH_COLUMN, WIDTH_COLUMN, "Area (m2)", "Occupant Load"])


def load_csv_path(path: str) -> pd.DataFrame:
    """Load a CSV file from a local path."""
    return pd.read_csv(path)
