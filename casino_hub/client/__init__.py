"""Single-page browser for the casino content API.

Public API:

    from casino_hub.client import (
        ContentApiClient,
        ContentBrowser,
        ContentFetchError,
        ContentTab,
        Phase,
        ViewState,
        filter_games,
    )
"""

from casino_hub.client.api_client import ContentApiClient, ContentFetchError
from casino_hub.client.state import (
    ContentBrowser,
    ContentTab,
    Phase,
    ViewState,
    filter_games,
)

__all__ = [
    "ContentApiClient",
    "ContentBrowser",
    "ContentFetchError",
    "ContentTab",
    "Phase",
    "ViewState",
    "filter_games",
]
