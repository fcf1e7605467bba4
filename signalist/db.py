from datetime import datetime, timezone
from functools import lru_cache
from supabase import create_client
from signalist.config import SUPABASE_URL, SUPABASE_KEY
from signalist.logging import log_event

USERS_TABLE = "users"
WATCHLIST_TABLE = "watchlist"

@lru_cache(maxsize=1)
def get_supabase_client():
    return create_client(SUPABASE_URL, SUPABASE_KEY)


def insert_user(profile):
    data = {
        "id": profile["id"],
        "email": profile["email"],
        "name": profile.get("name", ""),
        "country": profile.get("country", ""),
        "investment_goals": profile.get("investment_goals", ""),
        "risk_tolerance": profile.get("risk_tolerance", ""),
        "preferred_industry": profile.get("preferred_industry", ""),
    }
    get_supabase_client().table(USERS_TABLE).upsert(data).execute()

def get_user_by_email(email):
    res = get_supabase_client().table(USERS_TABLE).select("*").eq("email", email).limit(1).execute()
    return res.data[0] if res.data else None

def get_all_users_for_news_email():
    """
    Returns every user that can receive the daily news email, as {id, email, name}.
    """
    try:
        res = get_supabase_client().table(USERS_TABLE).select("id, email, name").execute()
    except Exception as e:
        log_event("ERROR", "Failed to fetch users for news email", error=str(e))
        return []
    return [
        {"id": str(row.get("id") or ""), "email": row["email"], "name": row["name"]}
        for row in res.data
        if row.get("email") and row.get("name")
    ]

def get_watchlist_symbols_by_email(email):
    if not email:
        return []
    try:
        user = get_user_by_email(email)
        if not user:
            return []
        res = get_supabase_client().table(WATCHLIST_TABLE).select("symbol").eq("user_id", user["id"]).execute()
        return [str(item["symbol"]) for item in res.data]
    except Exception as e:
        log_event("ERROR", "Error fetching watchlist symbols", email=email, error=str(e))
        return []

def get_watchlist(user_id):
    res = (
        get_supabase_client().table(WATCHLIST_TABLE)
        .select("*")
        .eq("user_id", user_id)
        .order("added_at", desc=True)
        .execute()
    )
    return res.data

def is_in_watchlist(user_id, symbol):
    res = (
        get_supabase_client().table(WATCHLIST_TABLE)
        .select("symbol")
        .eq("user_id", user_id)
        .eq("symbol", symbol.strip().upper())
        .execute()
    )
    return bool(res.data)

def add_to_watchlist(user_id, symbol, company):
    """
    Adds a symbol to the user's watchlist. Returns False when it is already there.
    """
    symbol = symbol.strip().upper()
    if is_in_watchlist(user_id, symbol):
        return False
    get_supabase_client().table(WATCHLIST_TABLE).insert({
        "user_id": user_id,
        "symbol": symbol,
        "company": (company or symbol).strip(),
        "added_at": datetime.now(timezone.utc).isoformat(),
    }).execute()
    return True

def remove_from_watchlist(user_id, symbol):
    (
        get_supabase_client().table(WATCHLIST_TABLE)
        .delete()
        .eq("user_id", user_id)
        .eq("symbol", symbol.strip().upper())
        .execute()
    )
