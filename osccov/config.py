from pathlib import Path

from osccov.data.specs import ParameterSpec

DEFAULT_OUTPUT_FILE = Path("oscCovInvertedPdg24.npz")

# Entry keys inside the output container
NAMES_KEY = "osc_param_names"
PRIORS_KEY = "osc_param_priors"
COV_KEY = "osc_param_cov"

PMNS_PARAMETER_NAMES = [
    "PMNS_SIN_SQUARED_12",
    "PMNS_SIN_SQUARED_13",
    "PMNS_SIN_SQUARED_23",
    "PMNS_DELTA_MASS_SQUARED_21",
    "PMNS_DELTA_MASS_SQUARED_32",
    "PMNS_DELTA_CP",
    "PMNS_SIGN_MASS_SQUARED_32",
]

# PDG 2024: https://pdg.lbl.gov/2024/listings/rpp2024-list-neutrino-mixing.pdf
# Asymmetric errors are replaced by the larger side.
SIN_SQUARED_12 = ParameterSpec("PMNS_SIN_SQUARED_12", 0.307, 0.013, "PDG 2024: 0.307 +0.013/-0.012")
SIN_SQUARED_13 = ParameterSpec("PMNS_SIN_SQUARED_13", 2.19e-2, 0.07e-2, "PDG 2024: 2.19E-2 +/- 0.07E-2")
DELTA_MASS_SQUARED_21 = ParameterSpec(
    "PMNS_DELTA_MASS_SQUARED_21", 7.53e-5, 0.18e-5, "PDG 2024: 7.53E-5 +/- 0.18E-5"
)
# Published value is 1.19 +/- 0.22. The prior here follows the reference table in use (0.22);
# the intended prior is unconfirmed.
DELTA_CP = ParameterSpec("PMNS_DELTA_CP", 0.22, 0.22, "PDG 2024: 1.19 +/- 0.22 (prior value unconfirmed)")
SIGN_MASS_SQUARED_32 = ParameterSpec(
    "PMNS_SIGN_MASS_SQUARED_32", 0.5, 10.0, "PDG 2024 prefers inverted; mostly unconstrained"
)

# PMNS_DELTA_MASS_SQUARED_32 should be free in any fit; the magnitude is stored.
PRESETS = {
    "inverted": (
        SIN_SQUARED_12,
        SIN_SQUARED_13,
        ParameterSpec("PMNS_SIN_SQUARED_23", 0.553, 0.024, "PDG 2024: 0.553 +0.016/-0.024 (inverted)"),
        DELTA_MASS_SQUARED_21,
        ParameterSpec("PMNS_DELTA_MASS_SQUARED_32", 2.529e-3, 0.029e-3, "PDG 2024: -2.529E-3 +/- 0.029E-3 (inverted)"),
        DELTA_CP,
        SIGN_MASS_SQUARED_32,
    ),
    "normal": (
        SIN_SQUARED_12,
        SIN_SQUARED_13,
        ParameterSpec("PMNS_SIN_SQUARED_23", 0.558, 0.021, "PDG 2024: 0.558 +0.015/-0.021 (normal)"),
        DELTA_MASS_SQUARED_21,
        ParameterSpec("PMNS_DELTA_MASS_SQUARED_32", 2.455e-3, 0.028e-3, "PDG 2024: 2.455E-3 +/- 0.028E-3 (normal)"),
        DELTA_CP,
        SIGN_MASS_SQUARED_32,
    ),
    "average": (
        SIN_SQUARED_12,
        SIN_SQUARED_13,
        ParameterSpec("PMNS_SIN_SQUARED_23", 0.556, 0.027, "average of orderings; covers full range"),
        DELTA_MASS_SQUARED_21,
        ParameterSpec("PMNS_DELTA_MASS_SQUARED_32", 2.487e-3, 0.113e-3, "average of orderings"),
        DELTA_CP,
        SIGN_MASS_SQUARED_32,
    ),
}
DEFAULT_PRESET = "inverted"
