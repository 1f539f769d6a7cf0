# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# ruff: ignore

"""
Score and filter apps against a typed query.

Cheap enough to run on every keystroke for a few hundred apps, so no
debouncing or result caching is needed.
"""

import re
import logging
from typing import List, Optional, Sequence

from .config import SWITCHER_CONFIG
from .search_models import ApplicationEntity

logger = logging.getLogger("AppRanker")

_WORD_SPLIT_RE = re.compile(r"[\s\-_]+")


def abbreviation(name: str) -> str:
    """First letter of each word: 'Visual Studio Code' -> 'vsc'."""
    words = _WORD_SPLIT_RE.split(name.lower())
    return "".join(word[:1] for word in words)


def clean_query(query: str) -> str:
    """Strip the single leading space that marks name search."""
    if query.startswith(" "):
        return query[1:]
    return query


def score_app(
    app: ApplicationEntity,
    query: str,
    recent_apps: Sequence[str] = (),
    scores: Optional[dict] = None,
) -> int:
    """Score one app for an already-cleaned query."""
    scores = scores or SWITCHER_CONFIG["search"]["scores"]
    name_lower = app.name.lower()
    query_lower = query.lower()
    score = 0

    # Recently used apps (stops mattering past position 20)
    if app.name in recent_apps:
        recent_index = list(recent_apps).index(app.name)
        score += max(0, scores["recent_base"] - recent_index * scores["recent_step"])

    if app.is_running:
        score += scores["running"]

    # Partial match anywhere, earlier is better
    index = name_lower.find(query_lower)
    if index != -1:
        score += scores["substring"]
        score += max(0, scores["substring_position"] - index)

    # 'vsc' for 'Visual Studio Code'
    if query_lower in abbreviation(app.name):
        score += scores["abbreviation"]

    if name_lower.startswith(query_lower):
        score += scores["prefix"]

    return score


def search_apps(
    apps: Sequence[ApplicationEntity],
    query: str,
    recent_apps: Sequence[str] = (),
    max_results: Optional[int] = None,
    min_score: Optional[int] = None,
) -> List[ApplicationEntity]:
    """
    Filter and rank apps for a query.

    An empty query (or a lone space) returns the apps unchanged. Otherwise
    only apps matching by substring, abbreviation or prefix are kept; the
    recency and running bonuses alone never qualify an app.
    """
    search_config = SWITCHER_CONFIG["search"]
    max_results = max_results if max_results is not None else search_config["max_results"]
    min_score = min_score if min_score is not None else search_config["min_score"]

    if not query or query == " ":
        return list(apps)

    cleaned = clean_query(query)
    if not cleaned:
        return list(apps)

    scored = [(app, score_app(app, cleaned, recent_apps)) for app in apps]
    matches = [item for item in scored if item[1] >= min_score]
    # sorted() is stable, so ties keep the default order
    matches.sort(key=lambda item: item[1], reverse=True)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Search '{cleaned}': {len(matches)} matches from {len(apps)} apps")

    return [app for app, _ in matches[:max_results]]
