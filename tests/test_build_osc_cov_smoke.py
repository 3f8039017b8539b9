import json
import subprocess
import sys
from pathlib import Path

import numpy as np
import pytest


def _script() -> Path:
    repo_root = Path(__file__).resolve().parents[1]
    return repo_root / "scripts" / "01_build_osc_cov.py"


def test_build_osc_cov_smoke(tmp_path: Path):
    result = subprocess.run(
        [sys.executable, str(_script())],
        cwd=tmp_path,
        check=True,
        capture_output=True,
        text=True,
    )

    out = tmp_path / "oscCovInvertedPdg24.npz"
    assert out.exists()
    for key in ["osc_param_names", "osc_param_priors", "osc_param_cov"]:
        assert key in result.stdout

    with np.load(out, allow_pickle=False) as npz:
        assert npz["osc_param_names"].tolist() == [
            "PMNS_SIN_SQUARED_12",
            "PMNS_SIN_SQUARED_13",
            "PMNS_SIN_SQUARED_23",
            "PMNS_DELTA_MASS_SQUARED_21",
            "PMNS_DELTA_MASS_SQUARED_32",
            "PMNS_DELTA_CP",
            "PMNS_SIGN_MASS_SQUARED_32",
        ]
        assert npz["osc_param_priors"].shape == (7,)
        assert npz["osc_param_cov"].shape == (7, 7)
        np.testing.assert_allclose(np.diag(npz["osc_param_cov"])[-1], 100.0)


def test_build_osc_cov_from_csv_with_metadata(tmp_path: Path):
    params_csv = tmp_path / "params.csv"
    params_csv.write_text("name,central_value,uncertainty\nA,1.0,0.5\nB,-2.0,3.0\n", encoding="utf-8")
    out = tmp_path / "custom.npz"
    meta = tmp_path / "logs" / "meta.json"

    subprocess.run(
        [
            sys.executable,
            str(_script()),
            str(out),
            "--params-csv",
            str(params_csv),
            "--metadata-json",
            str(meta),
        ],
        cwd=tmp_path,
        check=True,
        capture_output=True,
    )

    with np.load(out, allow_pickle=False) as npz:
        np.testing.assert_array_equal(npz["osc_param_cov"], [[0.25, 0.0], [0.0, 9.0]])

    payload = json.loads(meta.read_text(encoding="utf-8"))
    assert payload["names"] == ["A", "B"]
    assert payload["priors"] == [1.0, -2.0]
    assert payload["cov_diagonal"] == [0.25, 9.0]
    assert payload["source"] == str(params_csv)


def test_build_osc_cov_normal_preset(tmp_path: Path):
    out = tmp_path / "normal.npz"
    subprocess.run(
        [sys.executable, str(_script()), str(out), "--preset", "normal"],
        cwd=tmp_path,
        check=True,
        capture_output=True,
    )

    with np.load(out, allow_pickle=False) as npz:
        np.testing.assert_allclose(npz["osc_param_priors"][2], 0.558)
        np.testing.assert_allclose(npz["osc_param_cov"][2, 2], 0.021**2)


def test_build_osc_cov_rejects_duplicate_names(tmp_path: Path):
    params_csv = tmp_path / "params.csv"
    params_csv.write_text("name,central_value,uncertainty\nA,1.0,0.5\nA,2.0,0.5\n", encoding="utf-8")
    out = tmp_path / "bad.npz"

    result = subprocess.run(
        [sys.executable, str(_script()), str(out), "--params-csv", str(params_csv)],
        cwd=tmp_path,
        capture_output=True,
        text=True,
    )

    assert result.returncode != 0
    assert "construction failed" in result.stderr
    assert not out.exists()


def test_build_osc_cov_rejects_empty_csv(tmp_path: Path):
    params_csv = tmp_path / "params.csv"
    params_csv.write_bytes(b"")

    result = subprocess.run(
        [sys.executable, str(_script()), str(tmp_path / "out.npz"), "--params-csv", str(params_csv)],
        cwd=tmp_path,
        capture_output=True,
        text=True,
    )

    assert result.returncode != 0
    assert "construction failed" in result.stderr
    assert "Traceback" not in result.stderr


@pytest.mark.parametrize("blocker", ["directory", "file_parent"])
def test_build_osc_cov_reports_write_failure(tmp_path: Path, blocker: str):
    if blocker == "directory":
        out = tmp_path / "taken"
        out.mkdir()
    else:
        parent = tmp_path / "not_a_dir"
        parent.write_text("x", encoding="utf-8")
        out = parent / "osc.npz"

    result = subprocess.run(
        [sys.executable, str(_script()), str(out)],
        cwd=tmp_path,
        capture_output=True,
        text=True,
    )

    assert result.returncode != 0
    assert "write failed" in result.stderr
    assert "Traceback" not in result.stderr
    assert list(tmp_path.rglob("*.tmp")) == []


def test_build_osc_cov_reports_metadata_failure(tmp_path: Path):
    blocker = tmp_path / "logs"
    blocker.write_text("x", encoding="utf-8")
    out = tmp_path / "osc.npz"

    result = subprocess.run(
        [sys.executable, str(_script()), str(out), "--metadata-json", str(blocker / "meta.json")],
        cwd=tmp_path,
        capture_output=True,
        text=True,
    )

    assert result.returncode != 0
    assert "metadata write failed" in result.stderr
    assert out.exists()
