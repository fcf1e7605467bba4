# signalist/constants.py

INVESTMENT_GOALS = ["Growth", "Income", "Balanced", "Conservative"]

RISK_TOLERANCE_OPTIONS = ["Low", "Medium", "High"]

PREFERRED_INDUSTRIES = ["Technology", "Healthcare", "Finance", "Energy", "Consumer Goods"]

# First 10 are shown in the search palette before the user types
POPULAR_STOCK_SYMBOLS = [
    "AAPL", "MSFT", "GOOGL", "AMZN", "TSLA",
    "META", "NVDA", "NFLX", "ORCL", "CRM",
    "ADBE", "INTC", "AMD", "PYPL", "UBER",
    "ZOOM", "SPOT", "SQ", "SHOP", "ROKU",
    "SNOW", "PLTR", "COIN", "RBLX", "DDOG",
    "CRWD", "NET", "OKTA", "TWLO", "ZM",
]

DEFAULT_WELCOME_INTRO = (
    "Thanks for joining Signalist. You now have the tools to track markets and make smarter moves."
)
NO_MARKET_NEWS = "No market news."
