"""HTTP API for the casino content dataset."""

from casino_hub.api.app import create_app

__all__ = ["create_app"]
