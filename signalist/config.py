import os
from dotenv import load_dotenv

load_dotenv()

SUPABASE_URL = os.environ.get('SUPABASE_URL')
SUPABASE_KEY = os.environ.get('SUPABASE_KEY')

FINNHUB_API_KEY = os.environ.get('FINNHUB_API_KEY', '')
FINNHUB_BASE_URL = os.environ.get('FINNHUB_BASE_URL', 'https://finnhub.io/api/v1')
FINNHUB_TIMEOUT_SECONDS = float(os.environ.get('FINNHUB_TIMEOUT_SECONDS', 10))

GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY')
WELCOME_EMAIL_MODEL = os.environ.get('WELCOME_EMAIL_MODEL', 'gemini-2.0-flash-lite')
NEWS_SUMMARY_MODEL = os.environ.get('NEWS_SUMMARY_MODEL', 'gemini-2.5-flash-lite')

EMAIL_USER = os.environ.get('EMAIL_USER')
EMAIL_PASS = os.environ.get('EMAIL_PASS')
SMTP_HOST = os.environ.get('SMTP_HOST', 'smtp.gmail.com')
SMTP_PORT = int(os.environ.get('SMTP_PORT', '587'))

NEWS_SUMMARY_CRON = os.environ.get('NEWS_SUMMARY_CRON', '0 12 * * *')  # minute hour dom month dow, UTC
NEWS_LOOKBACK_DAYS = int(os.environ.get('NEWS_LOOKBACK_DAYS', '5'))
MAX_NEWS_ARTICLES = int(os.environ.get('MAX_NEWS_ARTICLES', '6'))
JOB_STEP_RETRIES = int(os.environ.get('JOB_STEP_RETRIES', '2'))
