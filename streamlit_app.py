"""
Streamlit web application for Signalist: sign in, search stocks, manage a
watchlist and read news for the stocks you follow.
"""
import streamlit as st

from signalist.ui.header import display_header
from signalist.ui.footer import display_footer
from signalist.ui.forms import auth_section
from signalist.ui.news import news_section
from signalist.ui.search_command import search_command_section
from signalist.ui.watchlist import watchlist_section

def main():
    """
    Main function to run the Streamlit app.
    Shows the auth forms until a user is signed in, then the dashboard.
    """
    st.set_page_config(page_title="Signalist", page_icon="📈", layout="wide")

    user = st.session_state.get("user")
    display_header(user)

    if not user:
        auth_section()
        display_footer()
        return

    search_command_section(user)

    col_watchlist, col_news = st.columns([1, 1])
    with col_watchlist:
        watchlist_section(user)
    with col_news:
        news_section(user)

    display_footer()

if __name__ == "__main__":
    main()
