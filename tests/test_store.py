"""Tests for the read-only content store."""

import pytest

from casino_hub.content import get_content_store
from casino_hub.content.dataset import CASINO_CONTENT


class TestContentStore:
    def test_get_all_returns_full_dataset(self, content_store):
        assert content_store.get_all() is CASINO_CONTENT

    def test_collections_keep_insertion_order(self, content_store):
        assert [g.id for g in content_store.get_games()][:3] == [
            "game_starburst",
            "game_bookofdead",
            "game_bonanzamegaways",
        ]
        assert content_store.get_promotions()[0].id == "promo_welcome"
        assert content_store.get_news()[-1].id == "news_promotions"

    def test_get_game_by_id_found(self, content_store):
        game = content_store.get_game_by_id("game_starburst")
        assert game is not None
        assert game.title == "Starburst"
        assert game.provider == "NetEnt"
        assert game.rtp == 96.09

    def test_get_game_by_id_not_found(self, content_store):
        assert content_store.get_game_by_id("non-existent-game-id") is None

    def test_get_game_by_empty_id(self, content_store):
        assert content_store.get_game_by_id("") is None

    def test_get_categories_sorted_unique(self, content_store):
        categories = content_store.get_categories()
        assert categories == sorted(set(categories))
        assert "slots" in categories
        assert "vampire" in categories

    def test_collections_are_read_only(self, content_store):
        games = content_store.get_games()
        with pytest.raises(AttributeError):
            games.clear()
        assert len(content_store.get_games()) == 10

    def test_counts(self, content_store):
        assert content_store.counts() == {
            "casinoGames": 10,
            "promotions": 5,
            "casinoNews": 5,
        }

    def test_store_is_singleton(self):
        assert get_content_store() is get_content_store()
