"""Synchronization between local guest state and the remote record store."""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from guest_registry.domain.errors import (
    CreateFailed,
    DeleteFailed,
    DuplicateEmail,
    FetchFailed,
    NotFound,
    RecordConflictError,
    RecordNotFoundError,
    RecordStoreError,
    RecordStoreUnavailableError,
    UpdateFailed,
    ValidationFailed,
)
from guest_registry.domain.guests import GuestDraft, GuestRecord

MIN_LOADING_SECONDS = 1.0

_logger = logging.getLogger(__name__)


class GuestStore(Protocol):
    """Remote record store holding the guest collection."""

    async def list_all(self) -> list[GuestRecord]:
        """Return every guest record."""

    async def get(self, guest_id: str) -> GuestRecord:
        """Return one record or raise RecordNotFoundError."""

    async def create(self, fields: dict[str, object]) -> GuestRecord:
        """Store a new record and return it with its assigned id."""

    async def update(self, guest_id: str, fields: dict[str, object]) -> GuestRecord:
        """Replace the mutable fields of a record and return it."""

    async def delete(self, guest_id: str) -> None:
        """Remove a record."""


def build_payload(draft: GuestDraft) -> dict[str, object]:
    """Validate a draft and return the trimmed fields to send to the store."""
    first_name = draft.first_name.strip()
    last_name = draft.last_name.strip()
    email = draft.email.strip()
    if not first_name or not last_name or not email:
        raise ValidationFailed()

    date_of_birth = (draft.date_of_birth or "").strip()
    if date_of_birth:
        try:
            date.fromisoformat(date_of_birth)
        except ValueError as exc:
            raise ValidationFailed("Date of birth must be a valid date.") from exc

    return {
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "phone": (draft.phone or "").strip(),
        "address": (draft.address or "").strip(),
        "date_of_birth": date_of_birth or None,
    }


@dataclass
class SyncController:
    """Runs guest CRUD against the store with a minimum indicator duration.

    Every fetch and update keeps its caller's indicator up for at least
    ``min_loading_seconds`` from the start of the store call. Calls slower
    than the floor get no extra delay.
    """

    store: GuestStore
    min_loading_seconds: float = MIN_LOADING_SECONDS
    clock: Callable[[], float] = time.monotonic
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep

    async def fetch_all(self) -> list[GuestRecord]:
        """Return the full guest collection."""
        started = self.clock()
        try:
            return await self.store.list_all()
        except RecordStoreError as exc:
            _logger.exception("Failed to fetch guests")
            raise FetchFailed() from exc
        finally:
            await self._hold_floor(started)

    async def fetch_one(
        self, guest_id: str, known: GuestRecord | None = None
    ) -> GuestRecord:
        """Return a guest, reusing ``known`` when it already has this id."""
        if known is not None and known.id == guest_id:
            return known
        if not guest_id:
            raise NotFound("No guest ID provided")

        started = self.clock()
        try:
            return await self.store.get(guest_id)
        except RecordNotFoundError as exc:
            _logger.warning("Guest %s not found", guest_id)
            raise NotFound() from exc
        except RecordStoreError as exc:
            _logger.exception("Failed to fetch guest %s", guest_id)
            raise FetchFailed("Failed to load guest details") from exc
        finally:
            await self._hold_floor(started)

    async def create(self, draft: GuestDraft) -> GuestRecord:
        """Validate and store a new guest."""
        payload = build_payload(draft)
        try:
            created = await self.store.create(payload)
        except RecordConflictError as exc:
            _logger.exception("Failed to create guest")
            if exc.field == "email":
                raise DuplicateEmail("Email is already in use or invalid.") from exc
            raise CreateFailed() from exc
        except RecordStoreUnavailableError as exc:
            _logger.exception("Failed to create guest")
            raise CreateFailed(
                "Failed to add guest. Please check your connection and try again."
            ) from exc
        except RecordStoreError as exc:
            _logger.exception("Failed to create guest")
            raise CreateFailed() from exc
        _logger.info("Created guest %s", created.id)
        return created

    async def update(self, guest_id: str, draft: GuestDraft) -> GuestRecord:
        """Validate and send a full replacement of a guest's fields."""
        payload = build_payload(draft)
        started = self.clock()
        try:
            updated = await self.store.update(guest_id, payload)
        except RecordConflictError as exc:
            _logger.exception("Failed to update guest %s", guest_id)
            if exc.field == "email":
                raise DuplicateEmail() from exc
            raise UpdateFailed() from exc
        except RecordNotFoundError as exc:
            _logger.exception("Failed to update guest %s", guest_id)
            raise NotFound() from exc
        except RecordStoreError as exc:
            _logger.exception("Failed to update guest %s", guest_id)
            raise UpdateFailed() from exc
        finally:
            await self._hold_floor(started)
        _logger.info("Updated guest %s", guest_id)
        return updated

    async def delete(self, guest_id: str, *, confirmed: bool) -> bool:
        """Delete a guest once the caller has confirmed.

        Returns False without touching the store when not confirmed.
        """
        if not confirmed:
            return False
        try:
            await self.store.delete(guest_id)
        except RecordStoreError as exc:
            _logger.exception("Failed to delete guest %s", guest_id)
            raise DeleteFailed() from exc
        _logger.info("Deleted guest %s", guest_id)
        return True

    async def _hold_floor(self, started: float) -> None:
        remaining = self.min_loading_seconds - (self.clock() - started)
        if remaining > 0:
            await self.sleep(remaining)
