"""Errors raised at the processor boundary."""


class InvalidInputError(Exception):
    """The analysis service rejected the submitted text."""

    def __init__(self, status_code: str, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
