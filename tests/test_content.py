"""Tests for the content models and the compiled dataset.

Covers:
- Dataset invariants (unique ids, rtp range, volatility, dates, non-empty text)
- Optional flags (absent rather than null on the wire)
- Model validation failures
- JSON round-trip
"""

import json
from datetime import date

import pytest
from pydantic import ValidationError

from casino_hub.content import CasinoContent, CasinoGame, NewsItem, Promotion, Volatility
from casino_hub.content.dataset import CASINO_CONTENT


def _game(**overrides):
    data = {
        "id": "game_x",
        "title": "X",
        "provider": "P",
        "categories": ["slots"],
        "imageUrl": "https://example.com/x.png",
        "description": "d",
        "rtp": 95.5,
        "volatility": "Medium",
    }
    data.update(overrides)
    return data


class TestDatasetInvariants:
    def test_collection_sizes(self):
        assert len(CASINO_CONTENT.casino_games) == 10
        assert len(CASINO_CONTENT.promotions) == 5
        assert len(CASINO_CONTENT.casino_news) == 5

    @pytest.mark.parametrize("collection", ["casino_games", "promotions", "casino_news"])
    def test_ids_unique(self, collection):
        ids = [item.id for item in getattr(CASINO_CONTENT, collection)]
        assert len(set(ids)) == len(ids)

    def test_rtp_within_range(self):
        for game in CASINO_CONTENT.casino_games:
            assert 0 < game.rtp <= 100

    def test_volatility_in_enumeration(self):
        allowed = {"Low", "Medium", "High", "Medium-Low", "Medium-High"}
        for game in CASINO_CONTENT.casino_games:
            assert game.volatility.value in allowed

    def test_every_game_has_categories(self):
        for game in CASINO_CONTENT.casino_games:
            assert game.categories
            assert all(c.strip() for c in game.categories)

    def test_dates_parse(self):
        for promo in CASINO_CONTENT.promotions:
            assert isinstance(date.fromisoformat(promo.expiry_date), date)
        for item in CASINO_CONTENT.casino_news:
            assert isinstance(date.fromisoformat(item.date), date)

    def test_promotion_text_not_blank(self):
        for promo in CASINO_CONTENT.promotions:
            assert promo.title.strip()
            assert promo.snippet.strip()
            assert promo.full_terms.strip()
            assert promo.image_url.strip()

    def test_news_text_not_blank(self):
        for item in CASINO_CONTENT.casino_news:
            assert item.title.strip()
            assert item.snippet.strip()
            assert item.full_content.strip()
            assert item.tags

    def test_popular_and_new_flags(self):
        popular = [g.id for g in CASINO_CONTENT.casino_games if g.is_popular]
        assert "game_starburst" in popular
        assert all(g.is_new is None for g in CASINO_CONTENT.casino_games)


class TestWireFormat:
    def test_camel_case_keys(self):
        wire = CASINO_CONTENT.to_wire()
        assert set(wire) == {"casinoGames", "promotions", "casinoNews"}
        assert "imageUrl" in wire["casinoGames"][0]
        assert "fullTerms" in wire["promotions"][0]
        assert "expiryDate" in wire["promotions"][0]
        assert "fullContent" in wire["casinoNews"][0]

    def test_unset_flags_are_absent(self):
        wire = CASINO_CONTENT.to_wire()
        starburst = wire["casinoGames"][0]
        assert starburst["isPopular"] is True
        assert "isNew" not in starburst
        bonanza = wire["casinoGames"][2]
        assert "isPopular" not in bonanza

    def test_volatility_serializes_as_string(self):
        wire = CASINO_CONTENT.to_wire()
        assert wire["casinoGames"][0]["volatility"] == "Low"

    def test_json_round_trip_is_identical(self):
        wire = CASINO_CONTENT.to_wire()
        parsed = json.loads(json.dumps(wire))
        assert parsed == wire
        assert CasinoContent.model_validate(parsed) == CASINO_CONTENT
        assert all(isinstance(g["rtp"], float) for g in parsed["casinoGames"])


class TestModelValidation:
    def test_accepts_snake_case_names(self):
        data = _game()
        data["image_url"] = data.pop("imageUrl")
        game = CasinoGame.model_validate(data)
        assert game.image_url == "https://example.com/x.png"

    @pytest.mark.parametrize("rtp", [0, -1, 100.01])
    def test_rtp_out_of_range(self, rtp):
        with pytest.raises(ValidationError):
            CasinoGame.model_validate(_game(rtp=rtp))

    def test_rtp_of_100_allowed(self):
        assert CasinoGame.model_validate(_game(rtp=100)).rtp == 100

    def test_unknown_volatility(self):
        with pytest.raises(ValidationError):
            CasinoGame.model_validate(_game(volatility="Extreme"))

    def test_compound_volatility(self):
        game = CasinoGame.model_validate(_game(volatility="Medium-High"))
        assert game.volatility is Volatility.MEDIUM_HIGH

    def test_empty_categories(self):
        with pytest.raises(ValidationError):
            CasinoGame.model_validate(_game(categories=[]))

    def test_blank_category(self):
        with pytest.raises(ValidationError):
            CasinoGame.model_validate(_game(categories=["slots", "  "]))

    def test_blank_title(self):
        with pytest.raises(ValidationError):
            CasinoGame.model_validate(_game(title="   "))

    def test_invalid_expiry_date(self):
        with pytest.raises(ValidationError, match="not a valid ISO date"):
            Promotion.model_validate(
                {
                    "id": "p",
                    "title": "t",
                    "snippet": "s",
                    "fullTerms": "f",
                    "imageUrl": "i",
                    "expiryDate": "2025-02-30",
                }
            )

    def test_invalid_news_date(self):
        with pytest.raises(ValidationError):
            NewsItem.model_validate(
                {
                    "id": "n",
                    "title": "t",
                    "snippet": "s",
                    "fullContent": "c",
                    "date": "yesterday",
                    "tags": [],
                }
            )

    def test_models_are_frozen(self):
        game = CasinoGame.model_validate(_game())
        with pytest.raises(ValidationError):
            game.title = "Changed"

    def test_duplicate_game_ids_rejected(self):
        with pytest.raises(ValidationError, match="duplicate ids in casinoGames"):
            CasinoContent.model_validate(
                {"casinoGames": [_game(), _game()], "promotions": [], "casinoNews": []}
            )

    @pytest.mark.parametrize("value", ["20250601", "2025-W23-1", "2025-06-01T00:00"])
    def test_dates_must_be_calendar_format(self, value):
        with pytest.raises(ValidationError, match="not a YYYY-MM-DD date"):
            NewsItem.model_validate(
                {
                    "id": "n",
                    "title": "t",
                    "snippet": "s",
                    "fullContent": "c",
                    "date": value,
                }
            )

    def test_collections_are_tuples(self):
        game = CasinoGame.model_validate(_game(categories=["slots", "popular"]))
        assert game.categories == ("slots", "popular")
        assert isinstance(CASINO_CONTENT.casino_games, tuple)
        assert isinstance(CASINO_CONTENT.casino_news[0].tags, tuple)
