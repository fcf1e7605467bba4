import json
from concurrent.futures import ThreadPoolExecutor

from signalist.config import MAX_NEWS_ARTICLES, NEWS_SUMMARY_CRON, NEWS_SUMMARY_MODEL, WELCOME_EMAIL_MODEL
from signalist.constants import DEFAULT_WELCOME_INTRO, NO_MARKET_NEWS
from signalist.db import get_all_users_for_news_email, get_watchlist_symbols_by_email
from signalist.finnhub import get_news
from signalist.jobs.client import StepError, jobs
from signalist.logging import log_event
from signalist.notifications.email import send_news_summary_email, send_welcome_email
from signalist.notifications.prompts import NEWS_SUMMARY_EMAIL_PROMPT, PERSONALIZED_WELCOME_EMAIL_PROMPT
from signalist.utils import format_date_today

USER_CREATED_EVENT = "app/user.created"
SEND_DAILY_NEWS_EVENT = "app/send.daily.news"
MAX_EMAIL_WORKERS = 8


def _deliver_welcome_email(email, name, intro):
    if not send_welcome_email(email=email, name=name, intro=intro):
        raise RuntimeError(f"Welcome email to {email} was not sent")
    return True


@jobs.create_function("sign-up-email", events=[USER_CREATED_EVENT])
def send_sign_up_email(ctx):
    data = ctx.event["data"]
    user_profile = f"""
      - Country: {data.get('country')}
      - Investment goals: {data.get('investment_goals')}
      - Risk Tolerance: {data.get('risk_tolerance')}
      - Preferred Industry: {data.get('preferred_industry')}
    """
    prompt = PERSONALIZED_WELCOME_EMAIL_PROMPT.replace("{{userProfile}}", user_profile)

    try:
        intro = ctx.infer("generate-welcome-intro", prompt, model=WELCOME_EMAIL_MODEL)
    except StepError as e:
        log_event("WARN", "Using default welcome intro", email=data.get("email"), error=str(e))
        intro = None

    ctx.run(
        "send-welcome-email",
        _deliver_welcome_email,
        email=data["email"],
        name=data.get("name", ""),
        intro=intro or DEFAULT_WELCOME_INTRO,
    )

    return {"success": True, "message": "Welcome email sent successfully"}


def _fetch_user_news(users):
    results = []
    for user in users:
        try:
            symbols = get_watchlist_symbols_by_email(user["email"])
            news = get_news(symbols or None)
            results.append({"user": user, "news": (news or [])[:MAX_NEWS_ARTICLES]})
        except Exception as e:
            log_event("ERROR", "Error fetching news for user", email=user["email"], error=str(e))
            results.append({"user": user, "news": []})
    return results


def _send_news_emails(summaries):
    date = format_date_today()

    def send(summary):
        if not summary["news_content"]:
            return False
        return send_news_summary_email(summary["user"]["email"], date, summary["news_content"])

    with ThreadPoolExecutor(max_workers=MAX_EMAIL_WORKERS) as pool:
        results = list(pool.map(send, summaries))

    for summary, sent in zip(summaries, results):
        if summary["news_content"] and not sent:
            log_event("ERROR", "News summary email not sent", email=summary["user"]["email"])
    return results


@jobs.create_function("daily-news-summary", events=[SEND_DAILY_NEWS_EVENT], cron=NEWS_SUMMARY_CRON)
def send_daily_news_summary(ctx):
    users = ctx.run("get-all-users", get_all_users_for_news_email)
    if not users:
        return {"success": False, "message": "No users found for news email"}

    users_with_news = ctx.run("fetch-user-news", _fetch_user_news, users)

    summaries = []
    for item in users_with_news:
        user = item["user"]
        try:
            prompt = NEWS_SUMMARY_EMAIL_PROMPT.replace("{{newsData}}", json.dumps(item["news"], indent=2))
            news_content = ctx.infer(f"summarize-news-{user['email']}", prompt, model=NEWS_SUMMARY_MODEL)
            summaries.append({"user": user, "news_content": news_content or NO_MARKET_NEWS})
        except StepError as e:
            log_event("ERROR", "Error summarizing news for user", email=user["email"], error=str(e))
            summaries.append({"user": user, "news_content": None})

    ctx.run("send-news-emails", _send_news_emails, summaries)

    return {"success": True, "message": f"Daily news summary processed for {len(users)} users"}
