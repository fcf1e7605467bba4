# signalist/ui/search_command.py

import streamlit as st
from signalist.db import add_to_watchlist, get_watchlist, remove_from_watchlist
from signalist.finnhub import get_company_profile, search_stocks
from signalist.logging import log_event

INITIAL_STOCKS_SHOWN = 10

def palette_view(stocks, search_term):
    """
    Decides what the search palette lists for the current term.
    Returns (stocks to display, count caption, empty-state message).
    """
    is_search_mode = bool((search_term or "").strip())
    display_stocks = list(stocks or []) if is_search_mode else list(stocks or [])[:INITIAL_STOCKS_SHOWN]
    if not display_stocks:
        return [], None, "No results found." if is_search_mode else "No stocks available."
    if is_search_mode:
        caption = f"Showing {len(display_stocks)} results"
    else:
        caption = f"Showing top {len(display_stocks)} stocks"
    return display_stocks, caption, None

def toggle_watchlist(user, stock):
    """
    Adds the stock to the user's watchlist, or removes it when already present.
    Returns False when the watchlist could not be updated.
    """
    try:
        if stock["is_in_watchlist"]:
            remove_from_watchlist(user["id"], stock["symbol"])
        else:
            add_to_watchlist(user["id"], stock["symbol"], stock["name"])
        return True
    except Exception as e:
        log_event("ERROR", "Failed to update watchlist", symbol=stock["symbol"], error=str(e))
        st.error(f"Could not update watchlist for {stock['symbol']}")
        return False

def stock_detail_section(symbol):
    profile = get_company_profile(symbol)
    if not profile:
        st.info(f"No company profile available for {symbol}.")
        return
    st.markdown(f"#### {profile.get('name', symbol)} ({symbol})")
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Exchange", profile.get("exchange") or "-")
    with col2:
        st.metric("Industry", profile.get("finnhubIndustry") or "-")
    with col3:
        market_cap = profile.get("marketCapitalization")
        st.metric("Market Cap", f"{market_cap:,.0f}M" if market_cap else "-")
    if profile.get("weburl"):
        st.markdown(f"[Company website]({profile['weburl']})")

def search_command_section(user):
    """
    Stock search palette: popular stocks until the user types, Finnhub
    search results afterwards, with a watchlist toggle per result.
    """
    with st.expander("Search Stocks", expanded=False):
        search_term = st.text_input("Search stocks...", key="search_term")
        try:
            watchlist_symbols = [row["symbol"] for row in get_watchlist(user["id"])]
        except Exception as e:
            log_event("ERROR", "Failed to fetch watchlist", user_id=user["id"], error=str(e))
            watchlist_symbols = []

        with st.spinner("Loading Stocks..."):
            stocks = search_stocks(search_term, watchlist_symbols)

        display_stocks, caption, empty_message = palette_view(stocks, search_term)
        if empty_message:
            st.write(empty_message)
        else:
            st.caption(caption)
            for stock in display_stocks:
                col_info, col_view, col_star = st.columns([6, 1, 1])
                with col_info:
                    st.markdown(f"**{stock['name']}**  \n{stock['symbol']} | {stock['exchange']} | {stock['type']}")
                with col_view:
                    if st.button("View", key=f"view_{stock['symbol']}"):
                        st.session_state["selected_symbol"] = stock["symbol"]
                with col_star:
                    star = "★" if stock["is_in_watchlist"] else "☆"
                    if st.button(star, key=f"star_{stock['symbol']}"):
                        if toggle_watchlist(user, stock):
                            st.rerun()

    selected_symbol = st.session_state.get("selected_symbol")
    if selected_symbol:
        stock_detail_section(selected_symbol)
        if st.button("Close"):
            st.session_state.pop("selected_symbol", None)
            st.rerun()
