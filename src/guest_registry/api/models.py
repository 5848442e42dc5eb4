"""Pydantic models for the guest API."""

from datetime import date

from pydantic import BaseModel

from guest_registry.domain.guests import GuestDraft, GuestRecord


class GuestPayload(BaseModel):
    """Guest form fields as submitted by a client.

    Required-field checks happen in the sync layer so clients get the same
    message the screens show.
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    date_of_birth: str | None = None

    def to_draft(self) -> GuestDraft:
        return GuestDraft(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone=self.phone,
            address=self.address,
            date_of_birth=self.date_of_birth or "",
        )


class GuestResponse(BaseModel):
    """A stored guest."""

    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    date_of_birth: date | None = None

    @classmethod
    def from_record(cls, record: GuestRecord) -> "GuestResponse":
        return cls(
            id=record.id,
            first_name=record.first_name,
            last_name=record.last_name,
            email=record.email,
            phone=record.phone,
            address=record.address,
            date_of_birth=record.date_of_birth,
        )


class GuestListResponse(BaseModel):
    guests: list[GuestResponse]


class ErrorResponse(BaseModel):
    error: str
    detail: str
