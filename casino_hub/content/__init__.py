"""Casino content models and the read-only content store.

Public API:

    from casino_hub.content import (
        CasinoContent,
        CasinoGame,
        ContentStore,
        NewsItem,
        Promotion,
        Volatility,
        get_content_store,
    )
"""

from casino_hub.content.models import (
    CasinoContent,
    CasinoGame,
    NewsItem,
    Promotion,
    Volatility,
)
from casino_hub.content.store import ContentStore, get_content_store

__all__ = [
    "CasinoContent",
    "CasinoGame",
    "ContentStore",
    "NewsItem",
    "Promotion",
    "Volatility",
    "get_content_store",
]
