"""
Finnhub integration: company and market news aggregation, symbol search
and company profiles.
"""
import threading
import time
from concurrent.futures import ThreadPoolExecutor

import requests

from signalist.config import (
    FINNHUB_API_KEY,
    FINNHUB_BASE_URL,
    FINNHUB_TIMEOUT_SECONDS,
    MAX_NEWS_ARTICLES,
    NEWS_LOOKBACK_DAYS,
)
from signalist.constants import POPULAR_STOCK_SYMBOLS
from signalist.logging import log_event
from signalist.utils import article_key, format_article, get_date_range, validate_article

PROFILE_REVALIDATE_SECONDS = 3600
SEARCH_REVALIDATE_SECONDS = 1800
MAX_SEARCH_RESULTS = 15
POPULAR_STOCKS_SHOWN = 10
MAX_FETCH_WORKERS = 8


class FinnhubError(Exception):
    """Raised when Finnhub answers with a non-2xx status."""


class NewsFetchError(Exception):
    pass


_cache = {}
_cache_lock = threading.Lock()


def clear_cache():
    with _cache_lock:
        _cache.clear()


def fetch_json(path, params=None, revalidate_seconds=None):
    """
    GETs a Finnhub endpoint and returns the decoded JSON body.

    When `revalidate_seconds` is given the response is kept in an in-process
    cache for that long; otherwise every call goes to the network.
    """
    query = dict(params or {})
    cache_key = (path, tuple(sorted(query.items())))
    if revalidate_seconds:
        with _cache_lock:
            cached = _cache.get(cache_key)
            if cached and cached[0] <= time.monotonic():
                del _cache[cache_key]
                cached = None
        if cached:
            return cached[1]

    query["token"] = FINNHUB_API_KEY
    response = requests.get(f"{FINNHUB_BASE_URL}{path}", params=query, timeout=FINNHUB_TIMEOUT_SECONDS)
    if not response.ok:
        raise FinnhubError(f"HTTP {response.status_code}: {response.reason}")
    data = response.json()

    if revalidate_seconds:
        now = time.monotonic()
        with _cache_lock:
            for key in [k for k, (expires_at, _) in _cache.items() if expires_at <= now]:
                del _cache[key]
            _cache[cache_key] = (now + revalidate_seconds, data)
    return data


def _clean_symbols(symbols):
    clean = []
    for symbol in symbols or []:
        symbol = (symbol or "").strip().upper()
        if symbol and symbol not in clean:
            clean.append(symbol)
    return clean


def _fetch_company_news(symbol, date_from, date_to):
    try:
        articles = fetch_json("/company-news", {"symbol": symbol, "from": date_from, "to": date_to})
    except Exception as e:
        log_event("ERROR", "Failed to fetch company news", symbol=symbol, error=str(e))
        return []
    if not isinstance(articles, list):
        return []
    return [article for article in articles if validate_article(article)]


def get_news(symbols=None):
    """
    Returns up to MAX_NEWS_ARTICLES formatted articles.

    With symbols, company news is sampled round-robin across the symbols so
    every ticker gets a share, then sorted newest first. Without symbols, or
    when no company article is found, general market news is returned.
    """
    try:
        clean_symbols = _clean_symbols(symbols)
        if not clean_symbols:
            return get_general_news()

        date_from, date_to = get_date_range(NEWS_LOOKBACK_DAYS)
        with ThreadPoolExecutor(max_workers=min(len(clean_symbols), MAX_FETCH_WORKERS)) as pool:
            results = pool.map(lambda s: _fetch_company_news(s, date_from, date_to), clean_symbols)
            per_symbol = dict(zip(clean_symbols, results))

        collected = []
        seen_keys = set()
        for round_index in range(MAX_NEWS_ARTICLES):
            for symbol in clean_symbols:
                queue = per_symbol[symbol]
                if not queue:
                    continue
                article = queue.pop(0)
                key = article_key(article)
                if key in seen_keys:
                    continue
                seen_keys.add(key)
                collected.append(format_article(article, True, symbol, round_index))
                if len(collected) >= MAX_NEWS_ARTICLES:
                    break
            if len(collected) >= MAX_NEWS_ARTICLES:
                break

        if not collected:
            log_event("INFO", "No company news found, falling back to general news", symbols=clean_symbols)
            return get_general_news()

        collected.sort(key=lambda a: a.get("datetime") or 0, reverse=True)
        return collected[:MAX_NEWS_ARTICLES]
    except Exception as e:
        log_event("ERROR", "Error in get_news", error=str(e))
        raise NewsFetchError("Failed to fetch news") from e


def get_general_news():
    general_news = fetch_json("/news", {"category": "general"})
    if not isinstance(general_news, list):
        return []

    seen_keys = set()
    unique_articles = []
    for article in general_news:
        if not validate_article(article):
            continue
        key = article_key(article)
        if key not in seen_keys:
            seen_keys.add(key)
            unique_articles.append(article)

    return [
        format_article(article, False, None, index)
        for index, article in enumerate(unique_articles[:MAX_NEWS_ARTICLES])
    ]


def get_company_profile(symbol):
    try:
        profile = fetch_json(
            "/stock/profile2",
            {"symbol": symbol.strip().upper()},
            revalidate_seconds=PROFILE_REVALIDATE_SECONDS,
        )
    except Exception as e:
        log_event("ERROR", "Failed to fetch company profile", symbol=symbol, error=str(e))
        return None
    return profile or None


def _popular_results():
    top = POPULAR_STOCK_SYMBOLS[:POPULAR_STOCKS_SHOWN]
    with ThreadPoolExecutor(max_workers=min(len(top), MAX_FETCH_WORKERS)) as pool:
        profiles = list(pool.map(get_company_profile, top))

    results = []
    for symbol, profile in zip(top, profiles):
        name = profile and (profile.get("name") or profile.get("ticker"))
        if not name:
            continue
        results.append({
            "symbol": symbol,
            "description": name,
            "type": "Common Stock",
            "exchange": profile.get("exchange"),
        })
    return results


def search_stocks(query=None, watchlist_symbols=None):
    """
    Powers the search palette: popular stocks for an empty query,
    Finnhub symbol search otherwise. Never raises; errors yield [].
    """
    try:
        trimmed = (query or "").strip()
        if not trimmed:
            results = _popular_results()
        else:
            data = fetch_json("/search", {"q": trimmed}, revalidate_seconds=SEARCH_REVALIDATE_SECONDS)
            results = data.get("result") if isinstance(data, dict) else None
            if not isinstance(results, list):
                results = []

        in_watchlist = {s.upper() for s in watchlist_symbols or []}
        stocks = []
        for result in results[:MAX_SEARCH_RESULTS]:
            symbol = (result.get("symbol") or "").upper()
            stocks.append({
                "symbol": symbol,
                "name": result.get("description") or symbol,
                "exchange": result.get("displaySymbol") or result.get("exchange") or "US",
                "type": result.get("type") or "Stock",
                "is_in_watchlist": symbol in in_watchlist,
            })
        return stocks
    except Exception as e:
        log_event("ERROR", "Error in stock search", query=query, error=str(e))
        return []
