import warnings
from pathlib import Path
from typing import List

import pandas as pd

from .specs import ParameterSpec
from .validate import InvalidInputError, assert_required_columns

PARAMETER_TABLE_COLUMNS = ["name", "central_value", "uncertainty"]


def _read_table(path: Path) -> pd.DataFrame:
    # Every cell is read as text: names like "NA" or "007" stay verbatim.
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("error", pd.errors.ParserWarning)
            return pd.read_csv(
                path,
                dtype=str,
                keep_default_na=False,
                index_col=False,
                skipinitialspace=True,
                encoding="utf-8",
            )
    except pd.errors.ParserWarning as exc:
        raise InvalidInputError(f"Rows in {path} have more fields than header columns: {exc}") from exc
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise InvalidInputError(f"Cannot parse parameter table {path}: {exc}") from exc


def load_parameter_table(path: Path) -> List[ParameterSpec]:
    """Read an ordered parameter table from CSV.

    Columns: name, central_value, uncertainty and an optional free-text note.
    Row order is kept; it becomes the index order of the generated dataset.
    """

    df = _read_table(path)
    assert_required_columns(df, PARAMETER_TABLE_COLUMNS)

    for col in ["central_value", "uncertainty"]:
        converted = pd.to_numeric(df[col].str.strip(), errors="coerce")
        bad_rows = df.index[converted.isna()].tolist()
        if bad_rows:
            raise InvalidInputError(f"Column {col!r} has missing or non-numeric values in rows: {bad_rows}")
        df[col] = converted.astype(float)

    has_note = "note" in df.columns
    specs = []
    for row in df.itertuples(index=False):
        specs.append(
            ParameterSpec(
                name=str(row.name).strip(),
                central_value=float(row.central_value),
                uncertainty=float(row.uncertainty),
                note=str(row.note) if has_note else "",
            )
        )
    return specs
