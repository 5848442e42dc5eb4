"""Error types for guest synchronization and record stores."""


class GuestError(Exception):
    """Base class for user-facing guest errors."""

    kind = "GuestError"
    default_message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailed(GuestError):
    """Local validation rejected the input before any store call."""

    kind = "ValidationFailed"
    default_message = "First name, last name, and email are required."


class DuplicateEmail(GuestError):
    """The store rejected the email as already in use or invalid."""

    kind = "DuplicateEmail"
    default_message = "Email is already in use"


class NotFound(GuestError):
    """The store has no record for the requested id."""

    kind = "NotFound"
    default_message = "Guest not found"


class FetchFailed(GuestError):
    kind = "FetchFailed"
    default_message = "Failed to load guests."


class CreateFailed(GuestError):
    kind = "CreateFailed"
    default_message = "Failed to add guest. Please check your input and try again."


class UpdateFailed(GuestError):
    kind = "UpdateFailed"
    default_message = "Failed to update guest"


class DeleteFailed(GuestError):
    kind = "DeleteFailed"
    default_message = "Failed to delete guest. Please try again."


class RecordStoreError(RuntimeError):
    """Raised by store adapters when the remote store rejects a call."""


class RecordNotFoundError(RecordStoreError):
    """The remote store reports no record for an id."""


class RecordConflictError(RecordStoreError):
    """The remote store rejected a field value, e.g. a unique index hit."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"Rejected value for field '{field}'")


class RecordStoreUnavailableError(RecordStoreError):
    """The remote store could not be reached."""
