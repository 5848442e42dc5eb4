"""Supabase-backed guest store."""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx
from supabase import Client, PostgrestAPIError

from guest_registry.domain.errors import (
    RecordConflictError,
    RecordNotFoundError,
    RecordStoreError,
    RecordStoreUnavailableError,
)
from guest_registry.domain.guests import GuestRecord, guest_from_row
from guest_registry.services.sync import GuestStore

_UNIQUE_VIOLATION = "23505"
_INVALID_TEXT_REPRESENTATION = "22P02"


@dataclass
class SupabaseGuestStore(GuestStore):
    """Guest store over a Supabase ``guests`` table.

    The Supabase client is synchronous; each query runs in a worker thread.
    """

    client: Client
    table_name: str = "guests"

    async def list_all(self) -> list[GuestRecord]:
        """Return every guest row."""
        response = await self._run(
            lambda: self.client.table(self.table_name).select("*").execute()
        )
        return [guest_from_row(row) for row in response.data or []]

    async def get(self, guest_id: str) -> GuestRecord:
        """Return a guest row by id."""
        response = await self._run(
            lambda: self.client.table(self.table_name)
            .select("*")
            .eq("id", guest_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            raise RecordNotFoundError(f"Guest {guest_id} not found")
        return guest_from_row(response.data[0])

    async def create(self, fields: dict[str, object]) -> GuestRecord:
        """Insert a guest row and return it."""
        response = await self._run(
            lambda: self.client.table(self.table_name).insert(fields).execute()
        )
        if not response.data:
            raise RecordStoreError("Failed to create guest in Supabase")
        return guest_from_row(response.data[0])

    async def update(self, guest_id: str, fields: dict[str, object]) -> GuestRecord:
        """Replace a guest row's fields and return it."""
        response = await self._run(
            lambda: self.client.table(self.table_name)
            .update(fields)
            .eq("id", guest_id)
            .execute()
        )
        if not response.data:
            raise RecordNotFoundError(f"Guest {guest_id} not found")
        return guest_from_row(response.data[0])

    async def delete(self, guest_id: str) -> None:
        """Delete a guest row."""
        response = await self._run(
            lambda: self.client.table(self.table_name)
            .delete()
            .eq("id", guest_id)
            .execute()
        )
        if not response.data:
            raise RecordNotFoundError(f"Guest {guest_id} not found")

    @staticmethod
    async def _run(query: Callable[[], Any]) -> Any:
        try:
            return await asyncio.to_thread(query)
        except PostgrestAPIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise RecordConflictError("email", exc.message) from exc
            if exc.code == _INVALID_TEXT_REPRESENTATION:
                raise RecordNotFoundError(exc.message or "Invalid guest id") from exc
            raise RecordStoreError(exc.message or "Supabase request failed") from exc
        except httpx.TransportError as exc:
            raise RecordStoreUnavailableError(str(exc)) from exc
