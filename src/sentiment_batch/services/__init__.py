from .batch_runner import BatchRunner, ERRORS_HEADER
from .utils import build_output_paths, format_decimal, format_run_timestamp

__all__ = [
    "BatchRunner",
    "ERRORS_HEADER",
    "build_output_paths",
    "format_decimal",
    "format_run_timestamp",
]
