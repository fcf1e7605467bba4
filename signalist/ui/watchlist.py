# signalist/ui/watchlist.py

import time
import pandas as pd
import streamlit as st
from signalist.db import get_watchlist, remove_from_watchlist
from signalist.logging import log_event
from signalist.market import get_quote

WATCHLIST_COLUMNS = ["Symbol", "Company", "Price", "Change %", "Added"]

def build_watchlist_frame(rows, quotes):
    """
    Builds the watchlist table from watchlist rows and a {symbol: quote} mapping.
    """
    records = []
    for row in rows:
        quote = quotes.get(row["symbol"]) or {}
        change = quote.get("change_percent")
        records.append({
            "Symbol": row["symbol"],
            "Company": row.get("company") or row["symbol"],
            "Price": round(quote["price"], 2) if quote.get("price") is not None else None,
            "Change %": round(change, 2) if change is not None else None,
            "Added": str(row.get("added_at") or "")[:10],
        })
    df = pd.DataFrame(records, columns=WATCHLIST_COLUMNS)
    df.index = df.index + 1
    return df

@st.cache_data(ttl=300)
def _cached_quote(symbol):
    return get_quote(symbol)

def watchlist_section(user):
    st.subheader("Watchlist")
    try:
        rows = get_watchlist(user["id"])
    except Exception as e:
        log_event("ERROR", "Failed to fetch watchlist", user_id=user["id"], error=str(e))
        rows = []

    if not rows:
        st.write("Your watchlist is empty. Use the search to add stocks.")
        return

    quotes = {row["symbol"]: _cached_quote(row["symbol"]) for row in rows}
    st.dataframe(build_watchlist_frame(rows, quotes), use_container_width=True)

    col_select, col_button = st.columns([3, 1])
    with col_select:
        symbol_to_remove = st.selectbox("Select Stock to remove", [row["symbol"] for row in rows])
    with col_button:
        if st.button("Remove Stock"):
            remove_from_watchlist(user["id"], symbol_to_remove)
            st.warning(f"{symbol_to_remove} removed from watchlist.")
            time.sleep(0.5)
            st.rerun()
