"""ASGI entrypoint for the guest registry API."""

from guest_registry.api.app import create_app
from guest_registry.containers import build_container

app = create_app(build_container())
