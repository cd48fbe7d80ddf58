"""HTML rendering for the Casino Hub browser.

Page fragments use string.Template for safe substitution. Every piece of
dataset text is HTML-escaped before substitution; links encode the next
``ViewState`` in their query string, so each click renders a fresh page.
"""

from __future__ import annotations

from html import escape
from string import Template
from urllib.parse import urlencode

from casino_hub.content.models import CasinoGame, NewsItem, Promotion

from .state import ContentBrowser, ContentTab, Phase, ViewState

PAGE = Template("""\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Casino Hub</title>
<style>
body { margin: 0; font-family: system-ui, sans-serif; background: #f5f6fa; color: #2c3e50; }
header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; padding: 20px; text-align: center; }
header h1 { margin: 0; font-size: 2.5rem; }
nav { background: #f8f9fa; border-bottom: 1px solid #dee2e6; padding: 15px 20px; display: flex; gap: 10px; }
nav a { padding: 12px 24px; border-radius: 8px; background: #e9ecef; color: #495057; text-decoration: none; }
nav a.active { background: #667eea; color: white; font-weight: 600; }
main { padding: 20px; }
.status { padding: 20px; text-align: center; }
.error { color: red; }
.chips a { display: inline-block; margin: 4px; padding: 6px 12px; border-radius: 16px; background: #e9ecef; color: #495057; text-decoration: none; }
.chips a.active { background: #667eea; color: white; }
.grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(300px, 1fr)); gap: 20px; }
.card { background: white; border-radius: 12px; box-shadow: 0 2px 8px rgba(0,0,0,0.1); overflow: hidden; }
.card img { width: 100%; display: block; }
.card .body { padding: 16px; }
.badge { display: inline-block; padding: 2px 8px; margin-right: 4px; border-radius: 4px; font-size: 12px; background: #ffc107; }
.tag { display: inline-block; padding: 2px 8px; margin-right: 4px; border-radius: 4px; font-size: 12px; background: #e9ecef; }
</style>
</head>
<body>
<header><h1>&#127920; Casino Hub</h1></header>
$body
</body>
</html>
""")

STATUS = Template('<div class="status">$content</div>')

NAV_TAB = Template('<a href="$href" class="$css">$label ($count)</a>')

GAME_CARD = Template("""\
<div class="card game" id="$id">
<img src="$image_url" alt="$title">
<div class="body">
<h3>$title</h3>
<div>$badges</div>
<p class="provider">$provider</p>
<p>$description</p>
<p>RTP: $rtp% &middot; Volatility: $volatility</p>
<div>$categories</div>
</div>
</div>
""")

PROMOTION_CARD = Template("""\
<div class="card promotion" id="$id">
<img src="$image_url" alt="$title">
<div class="body">
<h3>$title</h3>
<p>$snippet</p>
<p class="expiry">Expires: $expiry_date</p>
$details
<a class="toggle" href="$href">$toggle_label</a>
</div>
</div>
""")

NEWS_CARD = Template("""\
<div class="card news" id="$id">
<div class="body">
<p class="date">$date</p>
<h3>$title</h3>
<div>$tags</div>
<p>$snippet</p>
$details
<a class="toggle" href="$href">$toggle_label</a>
</div>
</div>
""")

_TAB_LABELS = {
    ContentTab.GAMES: "&#127918; Casino Games",
    ContentTab.PROMOTIONS: "&#127873; Promotions",
    ContentTab.NEWS: "&#128240; News",
}


def href(view: ViewState) -> str:
    """Link to the page rendering ``view``."""
    query = urlencode(view.to_query())
    return f"/?{query}" if query else "/"


def _page(body: str) -> str:
    return PAGE.substitute(body=body)


# ---------------------------------------------------------------------------
# Phase pages
# ---------------------------------------------------------------------------


def render_loading() -> str:
    return _page(STATUS.substitute(content="<div>Loading...</div>"))


def render_error(message: str) -> str:
    content = (
        f'<div class="error">Error: {escape(message)}</div>'
        '<p><a class="retry" href="/retry">Retry</a></p>'
    )
    return _page(STATUS.substitute(content=content))


def render_no_data() -> str:
    return _page(STATUS.substitute(content="<div>No data available</div>"))


# ---------------------------------------------------------------------------
# Games
# ---------------------------------------------------------------------------


def _game_card(game: CasinoGame) -> str:
    badges = []
    if game.is_popular:
        badges.append('<span class="badge">Popular</span>')
    if game.is_new:
        badges.append('<span class="badge">New</span>')
    return GAME_CARD.substitute(
        id=escape(game.id),
        image_url=escape(game.image_url),
        title=escape(game.title),
        badges="".join(badges),
        provider=escape(game.provider),
        description=escape(game.description),
        rtp=f"{game.rtp:g}",
        volatility=escape(game.volatility.value),
        categories="".join(f'<span class="tag">{escape(c)}</span>' for c in game.categories),
    )


def _search_form(view: ViewState) -> str:
    hidden = "".join(
        f'<input type="hidden" name="category" value="{escape(c)}">' for c in view.categories
    )
    return (
        '<form method="get" action="/" class="search">'
        f"{hidden}"
        f'<input type="search" name="q" value="{escape(view.search)}" '
        'placeholder="Search games, providers, descriptions...">'
        '<button type="submit">Search</button>'
        "</form>"
    )


def _category_chips(view: ViewState, categories: list[str]) -> str:
    chips = []
    for category in categories:
        css = "active" if category in view.categories else ""
        chips.append(
            f'<a class="{css}" href="{escape(href(view.toggle_category(category)))}">'
            f"{escape(category)}</a>"
        )
    return f'<div class="chips">{"".join(chips)}</div>'


def _active_filters(view: ViewState) -> str:
    if not view.has_filters:
        return ""
    parts = []
    if view.search:
        parts.append(f'search "{escape(view.search)}"')
    parts.extend(escape(c) for c in view.categories)
    return (
        f'<p class="active-filters">Active filters: {", ".join(parts)} '
        f'<a href="{escape(href(view.clear_filters()))}">Clear all</a></p>'
    )


def render_games(browser: ContentBrowser, view: ViewState) -> str:
    games = browser.filtered_games(view)
    total = len(browser.content.casino_games) if browser.content else 0
    parts = [
        f"<h2>&#127918; Casino Games ({len(games)} of {total})</h2>",
        _search_form(view),
        _category_chips(view, browser.categories()),
        _active_filters(view),
    ]
    if not games:
        parts.append(
            '<div class="empty"><h3>No games found</h3>'
            "<p>Try adjusting your search terms or category filters</p></div>"
        )
    else:
        parts.append(f'<div class="grid">{"".join(_game_card(g) for g in games)}</div>')
    return "\n".join(p for p in parts if p)


# ---------------------------------------------------------------------------
# Promotions and news
# ---------------------------------------------------------------------------


def _promotion_card(promo: Promotion, view: ViewState) -> str:
    expanded = promo.id in view.expanded_promotions
    details = (
        f'<div class="terms"><h4>Terms &amp; Conditions</h4><p>{escape(promo.full_terms)}</p></div>'
        if expanded
        else ""
    )
    return PROMOTION_CARD.substitute(
        id=escape(promo.id),
        image_url=escape(promo.image_url),
        title=escape(promo.title),
        snippet=escape(promo.snippet),
        expiry_date=escape(promo.expiry_date),
        details=details,
        href=escape(href(view.toggle_promotion(promo.id))),
        toggle_label="Hide terms" if expanded else "View terms",
    )


def render_promotions(browser: ContentBrowser, view: ViewState) -> str:
    promotions = browser.content.promotions if browser.content else []
    cards = "".join(_promotion_card(p, view) for p in promotions)
    return f'<h2>&#127873; Promotions</h2>\n<div class="grid">{cards}</div>'


def _news_card(item: NewsItem, view: ViewState) -> str:
    expanded = item.id in view.expanded_news
    details = f'<div class="full"><p>{escape(item.full_content)}</p></div>' if expanded else ""
    return NEWS_CARD.substitute(
        id=escape(item.id),
        date=escape(item.date),
        title=escape(item.title),
        tags="".join(f'<span class="tag">#{escape(t)}</span>' for t in item.tags),
        snippet=escape(item.snippet),
        details=details,
        href=escape(href(view.toggle_news(item.id))),
        toggle_label="Show less" if expanded else "Read more",
    )


def render_news(browser: ContentBrowser, view: ViewState) -> str:
    news = browser.content.casino_news if browser.content else []
    cards = "".join(_news_card(n, view) for n in news)
    return f'<h2>&#128240; Casino News</h2>\n<div class="news-list">{cards}</div>'


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------


def _nav(browser: ContentBrowser, view: ViewState) -> str:
    content = browser.content
    counts = {
        ContentTab.GAMES: len(content.casino_games),
        ContentTab.PROMOTIONS: len(content.promotions),
        ContentTab.NEWS: len(content.casino_news),
    }
    tabs = [
        NAV_TAB.substitute(
            href=escape(href(view.change_tab(tab))),
            css="active" if tab is view.tab else "",
            label=_TAB_LABELS[tab],
            count=counts[tab],
        )
        for tab in ContentTab
    ]
    return f"<nav>{''.join(tabs)}</nav>"


_TAB_RENDERERS = {
    ContentTab.GAMES: render_games,
    ContentTab.PROMOTIONS: render_promotions,
    ContentTab.NEWS: render_news,
}


def render_page(browser: ContentBrowser, view: ViewState) -> str:
    """Render the whole page for the browser's current phase and ``view``."""
    if browser.phase is Phase.LOADING:
        return render_loading()
    if browser.phase is Phase.ERROR:
        return render_error(browser.error or "Failed to fetch data")
    if browser.content is None:
        return render_no_data()
    main = _TAB_RENDERERS[view.tab](browser, view)
    return _page(f"{_nav(browser, view)}\n<main>\n{main}\n</main>")
