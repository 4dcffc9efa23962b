class InsightError(Exception):
    """Base class for errors raised while taking in insights."""


class InvalidInsightError(InsightError, ValueError):
    """Raised at the consumer boundary when a candidate is not an insight."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
