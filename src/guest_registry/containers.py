"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from guest_registry.adapters.pocketbase_guest_store import HttpxPocketBaseGuestStore
from guest_registry.adapters.supabase_guest_store import SupabaseGuestStore
from guest_registry.config import Settings
from guest_registry.services.sync import GuestStore, SyncController


@dataclass
class AppContainer:
    """Holds application-wide dependencies.

    ``sync_controller`` keeps the loading floor for screen state.
    ``api_controller`` shares the store but answers HTTP requests without it.
    """

    settings: Settings
    guest_store: GuestStore
    sync_controller: SyncController
    api_controller: SyncController
    close_resources: Callable[[], Awaitable[None]]


def build_guest_store(settings: Settings) -> GuestStore:
    """Create the record store selected by ``settings.record_store``."""
    if settings.record_store == "pocketbase":
        return HttpxPocketBaseGuestStore.build(
            base_url=settings.pocketbase_url,
            collection=settings.guests_collection,
            token=settings.pocketbase_token,
        )
    if not settings.supabase_url or not settings.supabase_service_key:
        raise ValueError(
            "SUPABASE_URL and SUPABASE_SERVICE_KEY are required for the supabase store"
        )
    supabase_client = create_client(
        settings.supabase_url, settings.supabase_service_key
    )
    return SupabaseGuestStore(supabase_client, table_name=settings.guests_collection)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    guest_store = build_guest_store(resolved_settings)
    sync_controller = SyncController(
        store=guest_store,
        min_loading_seconds=resolved_settings.min_loading_seconds,
    )
    api_controller = SyncController(store=guest_store, min_loading_seconds=0)

    async def close_resources() -> None:
        if isinstance(guest_store, HttpxPocketBaseGuestStore):
            await guest_store.close()

    return AppContainer(
        settings=resolved_settings,
        guest_store=guest_store,
        sync_controller=sync_controller,
        api_controller=api_controller,
        close_resources=close_resources,
    )
