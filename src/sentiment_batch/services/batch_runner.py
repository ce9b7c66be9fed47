"""Run field processors over each input line and write CSV rows."""

import logging
from itertools import islice
from typing import Iterable, TextIO

from sentiment_batch.models.errors import InvalidInputError
from sentiment_batch.models.processor import FieldProcessor
from sentiment_batch.models.schemas import BatchSummary

logger = logging.getLogger(__name__)

ERRORS_HEADER = "Input, Status Code, Error message"


class BatchRunner:
    """Processes input lines in order, up to a quota."""

    def __init__(
        self,
        processors: list[FieldProcessor],
        quota: int,
        reporter: logging.Logger | None = None,
    ):
        """
        Initialize batch runner.

        Args:
            processors: Processors applied to every line, in column order.
            quota: Maximum number of lines to read.
            reporter: Logger receiving progress messages.
        """
        self._processors = list(processors)
        self._quota = quota
        self._reporter = reporter or logger

    @property
    def results_header(self) -> str:
        """CSV header line of the results file."""
        return ",".join(["Input"] + [p.field_names for p in self._processors])

    def _process_line(self, line: str) -> str:
        fields = [processor.process(line) for processor in self._processors]
        return "".join(f",{field}" for field in fields)

    def run(
        self,
        input_lines: Iterable[str],
        output_sink: TextIO,
        error_sink: TextIO,
    ) -> BatchSummary:
        """
        Process input lines and write results and errors.

        Only InvalidInputError is handled per line; any other exception
        raised by a processor aborts the run.

        Args:
            input_lines: Lines of text, with or without trailing newlines.
            output_sink: Stream receiving the results CSV.
            error_sink: Stream receiving the errors CSV.

        Returns:
            BatchSummary with success and error counts.
        """
        self._reporter.info("Fields description")
        for processor in self._processors:
            self._reporter.info(processor.field_descriptions)

        output_sink.write(self.results_header + "\n")
        error_sink.write(ERRORS_HEADER + "\n")

        processed_count = 0
        errors_count = 0

        for raw_line in islice(input_lines, max(self._quota, 0)):
            line = raw_line.rstrip("\r\n")

            try:
                fields = self._process_line(line)
            except InvalidInputError as e:
                error_sink.write(f"{line},{e.status_code},{e.message}\n")
                errors_count += 1
                continue

            output_sink.write(f"{line}{fields}\n")
            processed_count += 1

        self._reporter.info("-" * 27)
        self._reporter.info("%d input successfully processed", processed_count)
        self._reporter.info("%d errors encountered", errors_count)

        return BatchSummary(processed=processed_count, errors=errors_count)
