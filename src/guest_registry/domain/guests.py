"""Domain models for guest records."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from guest_registry.domain.errors import RecordStoreError


class SortKey(str, Enum):
    """Sort options for the guest list."""

    NAME = "name"
    EMAIL = "email"


@dataclass(frozen=True)
class GuestRecord:
    """A guest as stored in the remote record store."""

    id: str
    first_name: str
    last_name: str
    email: str
    phone: str = ""
    address: str = ""
    date_of_birth: date | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass
class GuestDraft:
    """Editable guest fields as typed into a form.

    ``date_of_birth`` is an ISO date string, empty when absent.
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    date_of_birth: str = ""

    @classmethod
    def from_record(cls, record: GuestRecord) -> "GuestDraft":
        """Build an edit copy of a stored record."""
        return cls(
            first_name=record.first_name,
            last_name=record.last_name,
            email=record.email,
            phone=record.phone,
            address=record.address,
            date_of_birth=(
                record.date_of_birth.isoformat() if record.date_of_birth else ""
            ),
        )


GUEST_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "address",
    "date_of_birth",
)


def guest_from_row(row: dict[str, object]) -> GuestRecord:
    """Build a record from a store row, tolerating null optional fields.

    Date values may carry a time part (``2024-01-05 00:00:00.000Z``); only the
    calendar date is kept. A row without an id or with an unreadable date
    raises ``RecordStoreError``.
    """
    raw_dob = row.get("date_of_birth")
    try:
        guest_id = str(row["id"])
        date_of_birth = (
            date.fromisoformat(raw_dob[:10])
            if isinstance(raw_dob, str) and raw_dob
            else None
        )
    except (KeyError, ValueError) as exc:
        raise RecordStoreError(f"Malformed guest row: {exc}") from exc
    return GuestRecord(
        id=guest_id,
        first_name=str(row.get("first_name") or ""),
        last_name=str(row.get("last_name") or ""),
        email=str(row.get("email") or ""),
        phone=str(row.get("phone") or ""),
        address=str(row.get("address") or ""),
        date_of_birth=date_of_birth,
    )
