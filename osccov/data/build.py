from typing import Iterable, Sequence

import numpy as np

from .specs import OscCovDataset, ParameterSpec
from .validate import InvalidInputError, assert_finite, assert_unique_names


def build_osc_cov_dataset(
    names: Sequence[str],
    central_values: Sequence[float],
    uncertainties: Sequence[float],
) -> OscCovDataset:
    """Assemble the prior vector and diagonal covariance for an ordered parameter list.

    priors[i] is central_values[i]; cov[i, i] is uncertainties[i] squared and every
    off-diagonal entry is zero. Raises InvalidInputError if the inputs are not
    index-aligned, empty, carry duplicate names or non-finite numbers.
    """

    names = list(names)
    central_values = list(central_values)
    uncertainties = list(uncertainties)

    n = len(names)
    if n == 0:
        raise InvalidInputError("Parameter table is empty.")
    if len(central_values) != n or len(uncertainties) != n:
        raise InvalidInputError(
            "Parameter table columns are not index-aligned: "
            f"{n} names, {len(central_values)} central values, {len(uncertainties)} uncertainties."
        )
    assert_unique_names(names)
    assert_finite(central_values, "central values")
    assert_finite(uncertainties, "uncertainties")

    priors = np.asarray(central_values, dtype=float)
    sigmas = np.asarray(uncertainties, dtype=float)

    cov = np.zeros((n, n), dtype=float)
    for i in range(n):
        cov[i, i] = sigmas[i] * sigmas[i]

    priors.setflags(write=False)
    cov.setflags(write=False)
    return OscCovDataset(names=tuple(names), priors=priors, cov=cov)


def build_from_specs(specs: Iterable[ParameterSpec]) -> OscCovDataset:
    specs = list(specs)
    return build_osc_cov_dataset(
        [s.name for s in specs],
        [s.central_value for s in specs],
        [s.uncertainty for s in specs],
    )
