"""Domain-specific errors.

The plan generator never raises for degraded input; these errors cover
loading catalog data and decoding stored player records.
"""


class FitQuestError(Exception):
    """Base exception for all FitQuest errors."""

    pass


class CatalogLoadError(FitQuestError):
    """Raised when the exercise catalog file is missing or malformed."""

    pass


class PlayerRecordError(FitQuestError):
    """Raised when a stored player record cannot be decoded into a profile."""

    pass
