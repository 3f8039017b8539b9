from __future__ import annotations

import os
import tempfile
from pathlib import Path

import numpy as np

from osccov.config import COV_KEY, NAMES_KEY, PRIORS_KEY

from .specs import OscCovDataset
from .validate import InvalidInputError

ENTRY_KEYS = (NAMES_KEY, PRIORS_KEY, COV_KEY)
ENTRY_TYPES = {
    NAMES_KEY: "string array, single entry",
    PRIORS_KEY: "float64 vector",
    COV_KEY: "float64 matrix",
}


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_osc_cov_file(dataset: OscCovDataset, path: Path) -> Path:
    """Write names, priors and covariance to an .npz container, replacing any existing file.

    The container is written to a temporary file next to `path` and moved into
    place only once complete, so `path` never holds a partial write.
    """

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    arrays = {
        NAMES_KEY: np.asarray(dataset.names, dtype=str),
        PRIORS_KEY: np.asarray(dataset.priors, dtype=np.float64),
        COV_KEY: np.asarray(dataset.cov, dtype=np.float64),
    }

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as fh:
            np.savez_compressed(fh, **arrays)
            fh.flush()
            os.fsync(fh.fileno())
        os.chmod(tmp_name, _default_file_mode())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
    return path


def read_osc_cov_file(path: Path) -> OscCovDataset:
    with np.load(Path(path), allow_pickle=False) as npz:
        missing = [k for k in ENTRY_KEYS if k not in npz.files]
        if missing:
            raise InvalidInputError(f"{path} is missing entries: {missing}")
        names = tuple(str(v) for v in npz[NAMES_KEY].tolist())
        priors = np.asarray(npz[PRIORS_KEY], dtype=float)
        cov = np.asarray(npz[COV_KEY], dtype=float)

    if cov.shape != (len(names), len(names)) or priors.shape != (len(names),):
        raise InvalidInputError(
            f"{path} has inconsistent shapes: {len(names)} names, priors {priors.shape}, cov {cov.shape}."
        )
    return OscCovDataset(names=names, priors=priors, cov=cov)
