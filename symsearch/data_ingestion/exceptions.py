from typing import List


class CorpusError(Exception):
    """Raised when package data cannot be loaded or turned into a corpus."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause


class CorpusValidationError(CorpusError):
    """Raised when one or more package data entries are malformed."""

    def __init__(self, errors: List):
        self.errors = list(errors)
        summary = "; ".join(str(e) for e in self.errors[:5])
        if len(self.errors) > 5:
            summary += f"; ... and {len(self.errors) - 5} more"
        super().__init__(f"Invalid package data ({len(self.errors)} errors): {summary}")
