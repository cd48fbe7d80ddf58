"""Read-only lookups over the casino content dataset.

Collections come back as the dataset's own tuples, in insertion order;
callers cannot alter what the API serves.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from casino_hub.content.models import CasinoContent, CasinoGame, NewsItem, Promotion

logger = logging.getLogger(__name__)


class ContentStore:
    """Lookups over one immutable ``CasinoContent`` snapshot.

    Args:
        content: Validated dataset to serve.
    """

    def __init__(self, content: CasinoContent) -> None:
        self._content = content

    def get_all(self) -> CasinoContent:
        return self._content

    def get_games(self) -> tuple[CasinoGame, ...]:
        return self._content.casino_games

    def get_promotions(self) -> tuple[Promotion, ...]:
        return self._content.promotions

    def get_news(self) -> tuple[NewsItem, ...]:
        return self._content.casino_news

    def get_game_by_id(self, game_id: str) -> CasinoGame | None:
        """Return the game with ``game_id``, or ``None`` when absent.

        Linear scan; the collection is small and fixed.
        """
        for game in self._content.casino_games:
            if game.id == game_id:
                return game
        logger.debug("Game lookup miss: %r", game_id)
        return None

    def get_categories(self) -> list[str]:
        """Sorted unique categories across all games."""
        return sorted({c for game in self._content.casino_games for c in game.categories})

    def counts(self) -> dict[str, int]:
        """Collection sizes keyed by wire name."""
        return {
            "casinoGames": len(self._content.casino_games),
            "promotions": len(self._content.promotions),
            "casinoNews": len(self._content.casino_news),
        }


@lru_cache(maxsize=1)
def get_content_store() -> ContentStore:
    """Return the process-wide store over the compiled dataset."""
    from casino_hub.content.dataset import CASINO_CONTENT

    return ContentStore(CASINO_CONTENT)
