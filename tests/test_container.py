"""Tests for container wiring."""

import asyncio

import pytest

from guest_registry.adapters.pocketbase_guest_store import HttpxPocketBaseGuestStore
from guest_registry.adapters.supabase_guest_store import SupabaseGuestStore
from guest_registry.config import Settings
from guest_registry.containers import build_container


def test_build_container_uses_supabase(settings: Settings) -> None:
    container = build_container(settings)

    assert isinstance(container.guest_store, SupabaseGuestStore)
    assert container.sync_controller.store is container.guest_store
    assert container.sync_controller.min_loading_seconds == 0
    asyncio.run(container.close_resources())


def test_build_container_uses_pocketbase() -> None:
    settings = Settings(
        record_store="pocketbase",
        pocketbase_url="http://pb.test",
        guests_collection="guests",
    )

    container = build_container(settings)

    assert isinstance(container.guest_store, HttpxPocketBaseGuestStore)
    assert container.sync_controller.min_loading_seconds == 1.0
    assert container.api_controller.min_loading_seconds == 0
    assert container.api_controller.store is container.guest_store
    asyncio.run(container.close_resources())
    assert container.guest_store.http_client.is_closed


def test_build_container_requires_supabase_credentials() -> None:
    settings = Settings(
        record_store="supabase", supabase_url=None, supabase_service_key=None
    )

    with pytest.raises(ValueError, match="SUPABASE_URL"):
        build_container(settings)
