"""Utility functions."""

from datetime import datetime
from pathlib import Path

import numpy as np


def format_decimal(value: float) -> str:
    """
    Format a single-precision value as its shortest round-trip decimal.

    The API reports scores as 32-bit floats, so 0.8 arrives as
    0.800000011920929 and is written back as "0.8".

    Args:
        value: Number returned by the analysis service.

    Returns:
        Decimal text representation.
    """
    return str(np.float32(value))


def format_run_timestamp(moment: datetime) -> str:
    """
    Convert a datetime to the timestamp used in output file names.

    Args:
        moment: Start time of the run.

    Returns:
        Timestamp string safe for file names (YYYY-MM-DDTHH-MM-SS).
    """
    return moment.strftime("%Y-%m-%dT%H-%M-%S")


def build_output_paths(output_dir: Path, moment: datetime) -> tuple[Path, Path]:
    """
    Build the results and errors CSV paths for a run.

    Args:
        output_dir: Directory receiving the CSV files.
        moment: Start time of the run.

    Returns:
        Tuple of (results path, errors path).
    """
    stamp = format_run_timestamp(moment)
    return (
        Path(output_dir) / f"results_{stamp}.csv",
        Path(output_dir) / f"errors_{stamp}.csv",
    )
