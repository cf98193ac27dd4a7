"""Generate sample floor schedules for the Fire Safety Inspector Toolkit."""

import pandas as pd
import random
import os

from data.loader import LENGTH_COLUMN, WIDTH_COLUMN


def generate_floors_df(num_floors: int = 5, seed: int = 42) -> pd.DataFrame:
    """Generate a floor schedule: a wider podium floor and a repeated typical floor above it."""
    random.seed(seed)
    typical_length = random.choice([20, 25, 30])
    typical_width = random.choice([15, 20, 25])
    rows = []
    for floor in range(1, num_floors + 1):
        if floor == 1:
            rows.append({LENGTH_COLUMN: typical_length + 10, WIDTH_COLUMN: typical_width + 5})
        else:
            rows.append({LENGTH_COLUMN: typical_length, WIDTH_COLUMN: typical_width})
    return pd.DataFrame(rows)


def generate_sample_csv(output_dir: str):
    """Write a sample floor schedule CSV to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_floors_df().to_csv(os.path.join(output_dir, "floors.csv"), index=False)


def generate_sample_excel(output_dir: str):
    """Write the sample floor schedule as an Excel workbook."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "floors.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_floors_df().to_excel(writer, sheet_name="Floors", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csv(out)
    generate_sample_excel(out)
    print("Sample floor schedules generated in sample_files/")
