"""Configuration management for the batch analyzer."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)

AVAILABLE_PROCESSORS = ("sentiment", "classifier")


@dataclass
class Config:
    """Analyzer configuration loaded from environment variables."""

    # Google Cloud
    credentials_file: str = os.getenv("GOOGLE_APPLICATION_CREDENTIALS", "")

    # Batch
    quota: int = int(os.getenv("QUOTA", "10"))
    processors: str = os.getenv("PROCESSORS", "sentiment")
    output_dir: str = os.getenv("OUTPUT_DIR", ".")

    @property
    def processor_names(self) -> list[str]:
        """Processor names in configured order."""
        return [name.strip() for name in self.processors.split(",") if name.strip()]

    def validate(self) -> None:
        """Validate required configuration."""
        names = self.processor_names
        if not names:
            raise ValueError("PROCESSORS environment variable must name at least one processor")

        unknown = [name for name in names if name not in AVAILABLE_PROCESSORS]
        if unknown:
            raise ValueError(
                f"Unknown processor(s) in PROCESSORS: {', '.join(unknown)} "
                f"(available: {', '.join(AVAILABLE_PROCESSORS)})"
            )


config = Config()
