import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import argparse
from datetime import datetime, timezone

from osccov.config import DEFAULT_OUTPUT_FILE, DEFAULT_PRESET, PRESETS
from osccov.data.build import build_from_specs
from osccov.data.ingest import load_parameter_table
from osccov.data.store import ENTRY_KEYS, ENTRY_TYPES, write_osc_cov_file
from osccov.data.validate import InvalidInputError
from osccov.utils.logging import sha256_np_array, write_json


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Build the PMNS oscillation-parameter prior vector and diagonal covariance matrix."
    )
    parser.add_argument(
        "outfile",
        nargs="?",
        type=Path,
        default=DEFAULT_OUTPUT_FILE,
        help=f"Output .npz path (default: {DEFAULT_OUTPUT_FILE}). Existing files are replaced.",
    )
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default=DEFAULT_PRESET,
        help="Built-in parameter table (mass ordering).",
    )
    parser.add_argument(
        "--params-csv",
        type=Path,
        default=None,
        help="Optional: CSV with name,central_value,uncertainty[,note] columns; overrides --preset.",
    )
    parser.add_argument(
        "--metadata-json",
        type=Path,
        default=None,
        help="Optional: write a provenance JSON for the generated file.",
    )
    args = parser.parse_args()

    try:
        if args.params_csv is not None:
            if not args.params_csv.exists():
                raise InvalidInputError(f"Parameter table not found: {args.params_csv}")
            specs = load_parameter_table(args.params_csv)
            source = str(args.params_csv)
        else:
            specs = PRESETS[args.preset]
            source = f"preset:{args.preset}"
        dataset = build_from_specs(specs)
    except (InvalidInputError, OSError) as exc:
        raise SystemExit(f"construction failed: {exc}")

    try:
        out_path = write_osc_cov_file(dataset, args.outfile)
    except OSError as exc:
        raise SystemExit(f"write failed: {exc}")

    if args.metadata_json is not None:
        try:
            write_json(
                args.metadata_json,
                {
                    "source": source,
                    "output_file": str(out_path),
                    "entries": list(ENTRY_KEYS),
                    "names": list(dataset.names),
                    "priors": dataset.priors.tolist(),
                    "cov_diagonal": dataset.diagonal().tolist(),
                    "notes": {s.name: s.note for s in specs if s.note},
                    "priors_sha256": sha256_np_array(dataset.priors),
                    "cov_sha256": sha256_np_array(dataset.cov),
                    "created_utc": datetime.now(timezone.utc).isoformat(),
                },
            )
        except OSError as exc:
            raise SystemExit(f"metadata write failed: {exc}")

    print(f"Wrote {out_path} with:")
    for key in ENTRY_KEYS:
        print(f"  - {key} ({ENTRY_TYPES[key]})")
    if args.metadata_json is not None:
        print(f"Wrote {args.metadata_json}")


if __name__ == "__main__":
    main()
