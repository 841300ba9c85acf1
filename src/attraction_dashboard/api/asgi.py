"""ASGI entrypoint for the attraction dashboard API."""

from attraction_dashboard.api.app import create_app
from attraction_dashboard.containers import build_container

app = create_app(build_container())
