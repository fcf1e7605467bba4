import yfinance as yf
from signalist.logging import log_event

def get_quote(symbol):
    """
    Returns the last close and the change versus the previous close for a symbol,
    using two days of Yahoo Finance history. None when no data is available.
    """
    try:
        hist = yf.Ticker(symbol).history(period="2d")
        if hist.empty:
            log_event("WARN", "No price data for symbol", symbol=symbol)
            return None
        last_close = float(hist['Close'].iloc[-1])
        change_percent = None
        if len(hist) >= 2:
            previous_close = float(hist['Close'].iloc[-2])
            if previous_close != 0:
                change_percent = (last_close - previous_close) / previous_close * 100
        return {"price": last_close, "change_percent": change_percent}
    except Exception as e:
        log_event("ERROR", "Failed to fetch quote", symbol=symbol, error=str(e))
        return None
