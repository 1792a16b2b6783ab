"""
Rundown operation exceptions.

Every failure raised by the core carries a stable ``code`` label so callers
(the CLI, a request layer) can report a distinct outcome per failure kind.
All of them are raised before any write to the rundown is committed.
"""


class RundownError(Exception):
    """Base exception for all rundown errors."""

    code = "RUNDOWN_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"status": "error", "code": self.code, "message": self.message}


class UnrecognizedTypeError(RundownError):
    """Raised when an entry kind is missing or not one of event/delay/block."""

    code = "UNRECOGNIZED_TYPE"

    def __init__(self, kind: object):
        super().__init__(f"Object type missing or unrecognised: {kind}")
        self.kind = kind


class MissingFieldError(RundownError):
    """Raised when a required correlation field (such as ``id``) is absent."""

    code = "MISSING_FIELD"

    def __init__(self, field_name: str):
        super().__init__(f"Object malformed: {field_name} missing")
        self.field_name = field_name


class InvalidFieldError(RundownError):
    """Raised when fields do not fit the entry kind or touch immutable fields."""

    code = "INVALID_FIELD"

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []


class EntryNotFoundError(RundownError):
    """Raised when a referenced entry id does not exist in the rundown."""

    code = "NOT_FOUND"

    def __init__(self, entry_id: str, message: str | None = None):
        super().__init__(message or f"Entry '{entry_id}' not found")
        self.entry_id = entry_id


class DelayNotFoundError(EntryNotFoundError):
    """Raised when a delay id is missing or does not reference a delay entry."""

    code = "DELAY_NOT_FOUND"

    def __init__(self, entry_id: str):
        super().__init__(entry_id, f"Delay '{entry_id}' not found")


class StaleIndexError(RundownError):
    """Raised when the caller's view of a list position is out of date.

    The caller is expected to re-fetch the rundown and retry.
    """

    code = "STALE_INDEX"

    def __init__(self, entry_id: str, index: int, actual_id: str | None = None):
        super().__init__(f"Id '{entry_id}' not found at index {index}")
        self.entry_id = entry_id
        self.index = index
        self.actual_id = actual_id


class InvalidPositionError(RundownError):
    """Raised when an insertion or target index is negative."""

    code = "INVALID_POSITION"

    def __init__(self, position: object, message: str | None = None):
        super().__init__(message or f"Position must be non-negative, got {position}")
        self.position = position


class DuplicateEntryError(RundownError):
    """Raised when inserting an entry whose id is already in the rundown."""

    code = "DUPLICATE_ENTRY"

    def __init__(self, entry_id: str):
        super().__init__(f"Entry '{entry_id}' already exists")
        self.entry_id = entry_id


class ConfigurationError(RundownError):
    """Raised when required configuration is missing or unusable."""

    code = "CONFIGURATION_ERROR"
