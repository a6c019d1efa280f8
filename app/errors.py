class TrainerError(Exception):
    """Base class for errors raised by the trainer core."""


class LoadError(TrainerError):
    """Word corpus is missing, unreadable or malformed."""


class StoreError(TrainerError):
    """Best-result file could not be read or written."""
