"""Pydantic models for analysis results and run summaries."""

from pathlib import Path

from pydantic import BaseModel


class SentimentScore(BaseModel):
    """Overall sentiment of a document."""

    score: float
    magnitude: float


class CategoryScore(BaseModel):
    """A content category assigned to a document."""

    name: str
    confidence: float


class BatchSummary(BaseModel):
    """Result of a batch run."""

    processed: int = 0
    errors: int = 0
    results_path: Path | None = None
    errors_path: Path | None = None

    @property
    def total(self) -> int:
        return self.processed + self.errors
