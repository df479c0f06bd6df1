"""Exception hierarchy for the event loader."""


class SeederError(Exception):
    """Base class for all loader errors."""


class EmptyCandidatesError(SeederError, ValueError):
    """Raised when a random selection is attempted on an empty candidate set."""


class SchemaSetupError(SeederError):
    """Raised when the destination index cannot be checked or created."""

    def __init__(self, index: str, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"Schema setup failed for index '{index}': {reason}")


class BulkWriteError(SeederError):
    """Raised when the bulk request as a whole is rejected or never reaches the store."""
