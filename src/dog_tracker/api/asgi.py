"""ASGI entrypoint for the dog tracker API."""

from dog_tracker.api.app import create_app
from dog_tracker.containers import build_container

app = create_app(build_container())
