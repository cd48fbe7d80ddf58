"""Client-side state for browsing casino content.

Two pieces of state, owned by the view layer:

- ``ContentBrowser``: the load lifecycle. Starts in ``LOADING``, moves to
  ``READY`` or ``ERROR`` after the single fetch of ``/api/content``.
  ``retry()`` reloads the whole thing.
- ``ViewState``: what one page view shows (active tab, search term,
  selected categories, expanded cards). Immutable; every interaction
  returns a new instance. Carried in the query string, never persisted.

Leaving the promotions or news tab collapses every expanded card on that
tab. That reset-on-navigate behaviour is intentional.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Sequence

from casino_hub.content.models import CasinoContent, CasinoGame
from casino_hub.content.store import ContentStore

from .api_client import ContentApiClient, ContentFetchError

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class ContentTab(str, Enum):
    GAMES = "games"
    PROMOTIONS = "promotions"
    NEWS = "news"

    @classmethod
    def parse(cls, value: str | None) -> "ContentTab":
        """Unknown or missing tab names fall back to games."""
        try:
            return cls(value)
        except ValueError:
            return cls.GAMES


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------


def filter_games(
    games: Sequence[CasinoGame], search: str, categories: Iterable[str]
) -> list[CasinoGame]:
    """Games matching the search term AND at least one selected category.

    An empty search term or an empty category selection matches everything.
    """
    selected = list(categories)
    return [g for g in games if g.matches_search(search) and g.in_any_category(selected)]


def _flip(members: frozenset[str], item: str) -> frozenset[str]:
    return members - {item} if item in members else members | {item}


# ---------------------------------------------------------------------------
# ViewState
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ViewState:
    tab: ContentTab = ContentTab.GAMES
    search: str = ""
    categories: tuple[str, ...] = ()
    expanded_promotions: frozenset[str] = field(default_factory=frozenset)
    expanded_news: frozenset[str] = field(default_factory=frozenset)

    def toggle_category(self, category: str) -> "ViewState":
        if category in self.categories:
            cats = tuple(c for c in self.categories if c != category)
        else:
            cats = self.categories + (category,)
        return replace(self, categories=cats)

    def clear_filters(self) -> "ViewState":
        return replace(self, search="", categories=())

    def toggle_promotion(self, promotion_id: str) -> "ViewState":
        return replace(
            self, expanded_promotions=_flip(self.expanded_promotions, promotion_id)
        )

    def toggle_news(self, news_id: str) -> "ViewState":
        return replace(self, expanded_news=_flip(self.expanded_news, news_id))

    def change_tab(self, tab: ContentTab) -> "ViewState":
        """Switch tabs, collapsing cards on any tab that is not the target."""
        return replace(
            self,
            tab=tab,
            expanded_promotions=(
                self.expanded_promotions if tab is ContentTab.PROMOTIONS else frozenset()
            ),
            expanded_news=self.expanded_news if tab is ContentTab.NEWS else frozenset(),
        )

    @property
    def has_filters(self) -> bool:
        return bool(self.search or self.categories)

    # -- Query string --------------------------------------------------------

    def to_query(self) -> list[tuple[str, str]]:
        """Encode as query pairs; default values are omitted."""
        pairs: list[tuple[str, str]] = []
        if self.tab is not ContentTab.GAMES:
            pairs.append(("tab", self.tab.value))
        if self.search:
            pairs.append(("q", self.search))
        pairs.extend(("category", c) for c in self.categories)
        pairs.extend(("promo", p) for p in sorted(self.expanded_promotions))
        pairs.extend(("news", n) for n in sorted(self.expanded_news))
        return pairs

    @classmethod
    def from_query(cls, pairs: Iterable[tuple[str, str]]) -> "ViewState":
        tab: str | None = None
        search = ""
        categories: list[str] = []
        promos: set[str] = set()
        news: set[str] = set()
        for key, value in pairs:
            if key == "tab":
                tab = value
            elif key == "q":
                search = value
            elif key == "category" and value and value not in categories:
                categories.append(value)
            elif key == "promo" and value:
                promos.add(value)
            elif key == "news" and value:
                news.add(value)
        return cls(
            tab=ContentTab.parse(tab),
            search=search,
            categories=tuple(categories),
            expanded_promotions=frozenset(promos),
            expanded_news=frozenset(news),
        )


# ---------------------------------------------------------------------------
# ContentBrowser
# ---------------------------------------------------------------------------


class ContentBrowser:
    """Holds the fetched dataset and its load phase.

    Args:
        client: API client used for the one content fetch per load.
    """

    def __init__(self, client: ContentApiClient) -> None:
        self._client = client
        self.phase: Phase = Phase.LOADING
        self.content: CasinoContent | None = None
        self.error: str | None = None

    async def load(self) -> Phase:
        """Fetch the dataset once and settle into READY or ERROR."""
        self.phase = Phase.LOADING
        self.error = None
        try:
            self.content = await self._client.fetch_content()
        except ContentFetchError as exc:
            logger.error("Error fetching casino content: %s", exc)
            self.content = None
            self.error = str(exc)
            self.phase = Phase.ERROR
        else:
            logger.info(
                "Casino content ready: %d games, %d promotions, %d news",
                len(self.content.casino_games),
                len(self.content.promotions),
                len(self.content.casino_news),
            )
            self.phase = Phase.READY
        return self.phase

    async def retry(self) -> Phase:
        """Reload the whole application state from scratch."""
        self.content = None
        return await self.load()

    def filtered_games(self, view: ViewState) -> list[CasinoGame]:
        if self.content is None:
            return []
        return filter_games(self.content.casino_games, view.search, view.categories)

    def categories(self) -> list[str]:
        if self.content is None:
            return []
        return ContentStore(self.content).get_categories()
