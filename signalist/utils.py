# signalist/utils.py

from datetime import datetime, timedelta, timezone

COMPANY_SUMMARY_LENGTH = 200
GENERAL_SUMMARY_LENGTH = 150


def get_date_range(days):
    """
    Returns (from, to) as ISO dates, where `to` is today in UTC
    and `from` is `days` days earlier.
    """
    to_date = datetime.now(timezone.utc).date()
    from_date = to_date - timedelta(days=days)
    return from_date.isoformat(), to_date.isoformat()


def validate_article(article) -> bool:
    return bool(
        article
        and article.get("headline")
        and article.get("summary")
        and article.get("url")
        and article.get("datetime")
    )


def article_key(article):
    return f"{article.get('id')}-{article.get('url')}-{article.get('headline')}"


def _truncate(text, length):
    if len(text) <= length:
        return text
    return text[:length] + "..."


def format_article(article, is_company_news, symbol=None, index=0):
    """
    Converts a raw Finnhub article into the shape used by the UI and the
    news summary prompt.
    """
    summary_length = COMPANY_SUMMARY_LENGTH if is_company_news else GENERAL_SUMMARY_LENGTH
    return {
        "id": article.get("id") or index,
        "headline": article["headline"].strip(),
        "summary": _truncate(article["summary"].strip(), summary_length),
        "source": article.get("source") or ("Company News" if is_company_news else "Market News"),
        "url": article["url"],
        "datetime": article["datetime"],
        "image": article.get("image") or "",
        "category": "company" if is_company_news else (article.get("category") or "general"),
        "related": symbol if is_company_news else (article.get("related") or ""),
    }


def format_date_today():
    now = datetime.now(timezone.utc)
    return f"{now:%A, %B} {now.day}, {now.year}"
