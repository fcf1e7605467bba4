# signalist/ui/header.py

import streamlit as st
from signalist.auth import sign_out

def display_header(user=None):
    st.markdown(
        """
        <style>
        .header-container {
            display: flex;
            align-items: center;
            position: sticky;
            top: 0;
            padding: 10px 0;
            border-bottom: 1px solid #30333A;
            z-index: 1000;
        }
        .header-title {
            font-size: 20px;
            font-weight: bold;
            color: #FDD458;
            text-align: center;
            flex-grow: 1;
        }
        .block-container {
            padding-top: 60px;
        }
        </style>
        """,
        unsafe_allow_html=True
    )

    col1, col2, col3 = st.columns([1, 6, 1])
    with col1:
        st.markdown("### 📈")
    with col2:
        st.markdown(
            "<div class='header-title'>Signalist - track markets, make smarter moves</div>",
            unsafe_allow_html=True
        )
    with col3:
        if user:
            st.caption(user.get("name") or user.get("email"))
            if st.button("Sign Out", use_container_width=True):
                sign_out()
                st.session_state.pop("user", None)
                st.rerun()

    st.markdown("")
