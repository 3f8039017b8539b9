import math
from typing import Iterable, Sequence


class InvalidInputError(ValueError):
    """Raised when a parameter table cannot be turned into a dataset."""


def assert_required_columns(df, required: Iterable[str]) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise InvalidInputError(f"Missing required columns: {missing}")


def assert_unique_names(names: Sequence[str]) -> None:
    empty = [i for i, name in enumerate(names) if not isinstance(name, str) or not name.strip()]
    if empty:
        raise InvalidInputError(f"Parameter names must be non-empty strings; bad positions: {empty}")

    seen = set()
    duplicates = []
    for name in names:
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    if duplicates:
        raise InvalidInputError(f"Duplicate parameter names: {duplicates}")


def assert_finite(values: Sequence[float], label: str) -> None:
    bad = []
    for i, v in enumerate(values):
        try:
            fv = float(v)
        except (TypeError, ValueError):
            bad.append(i)
            continue
        if not math.isfinite(fv):
            bad.append(i)
    if bad:
        raise InvalidInputError(f"Non-finite {label} at positions: {bad}")
