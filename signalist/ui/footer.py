# signalist/ui/footer.py

import streamlit as st

def display_footer():
    st.markdown("""
        <style>
        .footer {
            position: fixed;
            left: 0;
            bottom: 0;
            width: 100%;
            text-align: center;
            padding: 10px;
            font-size: 0.85em;
            color: grey;
            z-index: 100;
            border-top: 1px solid #30333A;
        }
        </style>
        <div class="footer">
            <i>Market data provided by Finnhub. News summaries are AI generated and are not investment advice.</i>
        </div>
    """, unsafe_allow_html=True)
