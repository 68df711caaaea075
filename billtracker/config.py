import os

from dotenv import load_dotenv

load_dotenv()

DB_PATH = (
    os.environ.get("DB_PATH")
    or os.environ.get("BILLTRACKER_DB_PATH")
    or "billtracker.sqlite3"  # fallback
)

DEBUG_MODE    = os.getenv("BILLTRACKER_DEBUG", "0") == "1"
DOCS_ENABLED  = os.getenv("BILLTRACKER_DOCS", "0") == "1"
CORS_ORIGINS  = [o for o in os.getenv("BILLTRACKER_CORS", "").split(",") if o]
LOG_LEVEL     = os.getenv("LOG_LEVEL", "INFO")
LOGO_BASE_URL = os.getenv("BILLTRACKER_LOGO_BASE", "https://logo.clearbit.com").rstrip("/")
