"""Analyze handler for running a batch over one input file."""

import logging
from contextlib import ExitStack
from datetime import datetime
from pathlib import Path

from sentiment_batch.infrastructure.language_client import LanguageClient
from sentiment_batch.models.schemas import BatchSummary
from sentiment_batch.services.batch_runner import BatchRunner
from sentiment_batch.services.utils import build_output_paths

logger = logging.getLogger(__name__)


def analyze_file(
    input_path: Path,
    output_dir: Path,
    language_client: LanguageClient,
    runner: BatchRunner,
    timestamp: datetime | None = None,
) -> BatchSummary:
    """
    Analyze every line of a file and write the results and errors CSVs.

    The input is opened before the outputs, so a missing input file
    raises FileNotFoundError without creating any output file. Lines
    split on LF only (CRLF is stripped by the runner) and undecodable
    bytes become U+FFFD. The client and all three streams are closed
    on every exit path.

    Args:
        input_path: Text file with one entry per line.
        output_dir: Directory receiving the CSV files.
        language_client: Client shared by the runner's processors.
        runner: Configured batch runner.
        timestamp: Run start time used in output file names.

    Returns:
        BatchSummary with counts and output paths.
    """
    results_path, errors_path = build_output_paths(
        output_dir, timestamp or datetime.now()
    )

    with ExitStack() as stack:
        stack.callback(language_client.close)

        input_file = stack.enter_context(
            open(input_path, "r", encoding="utf-8", errors="replace", newline="\n")
        )
        results_file = stack.enter_context(
            open(results_path, "w", encoding="utf-8", newline="")
        )
        errors_file = stack.enter_context(
            open(errors_path, "w", encoding="utf-8", newline="")
        )
        logger.info("Writing results to %s, errors to %s", results_path, errors_path)

        summary = runner.run(input_file, results_file, errors_file)

    return summary.model_copy(
        update={"results_path": results_path, "errors_path": errors_path}
    )
