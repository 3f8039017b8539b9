from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    central_value: float
    uncertainty: float
    note: str = ""


@dataclass(frozen=True)
class OscCovDataset:
    """Parameter names, prior vector and covariance matrix, index-aligned."""

    names: Tuple[str, ...]
    priors: np.ndarray
    cov: np.ndarray

    @property
    def n(self) -> int:
        return len(self.names)

    def diagonal(self) -> np.ndarray:
        return np.diag(self.cov).copy()
