"""Main entry point for the batch sentiment analyzer."""

import argparse
import logging
import sys
from pathlib import Path

from sentiment_batch.config import config
from sentiment_batch.handlers.analyze import analyze_file
from sentiment_batch.infrastructure.dependency_injection import DependenciesContainer
from sentiment_batch.models.schemas import BatchSummary

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)
logger = logging.getLogger(__name__)


def run(
    input_path: Path,
    container: DependenciesContainer | None = None,
) -> BatchSummary:
    """
    Run the configured processors over an input file.

    Args:
        input_path: Existing text file to analyze.
        container: DI container; a new one is created if omitted.

    Returns:
        BatchSummary of the run.
    """
    config.validate()

    container = container or DependenciesContainer()
    logger.info("Processors: %s (quota=%d)", ", ".join(config.processor_names), config.quota)
    logger.info("-" * 27)

    return analyze_file(
        input_path=input_path,
        output_dir=Path(config.output_dir),
        language_client=container.language_client(),
        runner=container.batch_runner(),
    )


def main():
    """Entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Analyze the sentiment of each line of a text file"
    )
    parser.add_argument(
        "input_file",
        help="Path to the input text file, one entry per line (~ is expanded)",
    )

    args = parser.parse_args()
    input_path = Path(args.input_file).expanduser()

    logger.info("Natural language API")
    logger.info("Using service account file: %s", config.credentials_file or "<default>")
    logger.info("Input file: %s", input_path)

    if not input_path.exists():
        print(f"Input file does not exist: {input_path}", file=sys.stderr)
        sys.exit(1)

    try:
        summary = run(input_path)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error("Fatal error: %s", e, exc_info=True)
        sys.exit(1)

    logger.info("Results: %s", summary.results_path)
    logger.info("Errors: %s", summary.errors_path)


if __name__ == "__main__":
    main()
