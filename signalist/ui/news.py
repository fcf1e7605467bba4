# signalist/ui/news.py

from datetime import datetime, timezone
import streamlit as st
from signalist.db import get_watchlist
from signalist.finnhub import NewsFetchError, get_news
from signalist.logging import log_event

def _published(article):
    timestamp = article.get("datetime")
    if not timestamp:
        return ""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%b %d, %H:%M UTC")

def news_section(user):
    st.subheader("Market News")
    try:
        symbols = [row["symbol"] for row in get_watchlist(user["id"])]
    except Exception as e:
        log_event("ERROR", "Failed to fetch watchlist", user_id=user["id"], error=str(e))
        symbols = []
    try:
        articles = get_news(symbols or None)
    except NewsFetchError as e:
        st.error(str(e))
        return

    if not articles:
        st.write("No market news.")
        return

    for article in articles:
        label = article["related"] or article["category"]
        st.markdown(f"**[{article['headline']}]({article['url']})**")
        st.caption(f"{label} | {article['source']} | {_published(article)}")
        st.write(article["summary"])
