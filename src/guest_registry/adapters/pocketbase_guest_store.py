"""PocketBase records API client for the guest collection."""

from dataclasses import dataclass

import httpx

from guest_registry.domain.errors import (
    RecordConflictError,
    RecordNotFoundError,
    RecordStoreError,
    RecordStoreUnavailableError,
)
from guest_registry.domain.guests import GuestRecord, guest_from_row
from guest_registry.services.sync import GuestStore

PAGE_SIZE = 500


@dataclass
class HttpxPocketBaseGuestStore(GuestStore):
    """HTTPX-backed guest store talking to a PocketBase collection."""

    base_url: str
    http_client: httpx.AsyncClient
    collection: str = "guests"
    token: str | None = None

    @classmethod
    def build(
        cls, base_url: str, collection: str = "guests", token: str | None = None
    ) -> "HttpxPocketBaseGuestStore":
        """Create a store with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            collection=collection,
            token=token,
        )

    @property
    def records_url(self) -> str:
        return f"{self.base_url}/api/collections/{self.collection}/records"

    async def list_all(self) -> list[GuestRecord]:
        """Read every page of the collection."""
        guests: list[GuestRecord] = []
        page = 1
        while True:
            payload = await self._request(
                "GET",
                self.records_url,
                params={"page": page, "perPage": PAGE_SIZE, "skipTotal": 1},
            )
            items = payload.get("items", [])
            guests.extend(guest_from_row(item) for item in items)
            if len(items) < PAGE_SIZE:
                return guests
            page += 1

    async def get(self, guest_id: str) -> GuestRecord:
        """Fetch a single record."""
        payload = await self._request("GET", f"{self.records_url}/{guest_id}")
        return guest_from_row(payload)

    async def create(self, fields: dict[str, object]) -> GuestRecord:
        """Create a record and return it with its assigned id."""
        payload = await self._request("POST", self.records_url, json=fields)
        return guest_from_row(payload)

    async def update(self, guest_id: str, fields: dict[str, object]) -> GuestRecord:
        """Replace a record's fields and return it."""
        payload = await self._request(
            "PATCH", f"{self.records_url}/{guest_id}", json=fields
        )
        return guest_from_row(payload)

    async def delete(self, guest_id: str) -> None:
        """Delete a record."""
        await self._request("DELETE", f"{self.records_url}/{guest_id}")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _request(
        self,
        method: str,
        url: str,
        params: dict[str, object] | None = None,
        json: dict[str, object] | None = None,
    ) -> dict[str, object]:
        headers = {"Authorization": self.token} if self.token else None
        try:
            response = await self.http_client.request(
                method, url, params=params, json=json, headers=headers, timeout=15
            )
        except httpx.TransportError as exc:
            raise RecordStoreUnavailableError(str(exc)) from exc
        if response.status_code == httpx.codes.NOT_FOUND:
            raise RecordNotFoundError(f"No record at {url}")
        if response.is_error:
            raise _rejection(response)
        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return {}
        return response.json()


def _rejection(response: httpx.Response) -> RecordStoreError:
    """Translate a PocketBase error body into a store error."""
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}
    message = body.get("message") or f"PocketBase returned {response.status_code}"
    field_errors = body.get("data") or {}
    if isinstance(field_errors, dict) and "email" in field_errors:
        detail = field_errors["email"]
        if isinstance(detail, dict):
            message = detail.get("message", message)
        return RecordConflictError("email", message)
    return RecordStoreError(message)
