import os
from dotenv import load_dotenv

load_dotenv(override=False)

DATABASE_URL = os.getenv("DATABASE_URL")
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN")
TELEGRAM_WEBHOOK_SECRET = os.getenv("TELEGRAM_WEBHOOK_SECRET")
TELEGRAM_POLL_TIMEOUT = int(os.getenv("TELEGRAM_POLL_TIMEOUT", "60"))

# Placeholder secret kept for parity with existing deployments; override it!
DEFAULT_JWT_SECRET = "supersecret"
JWT_SECRET = os.getenv("JWT_SECRET") or DEFAULT_JWT_SECRET
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_DAYS = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "7"))

# Argon2 cost parameters
ARGON2_TIME_COST = int(os.getenv("ARGON2_TIME_COST", "2"))
ARGON2_MEMORY_COST = int(os.getenv("ARGON2_MEMORY_COST", "102400"))  # KiB, 100 MB
ARGON2_PARALLELISM = int(os.getenv("ARGON2_PARALLELISM", "8"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

REQUIRED_SETTINGS = ("DATABASE_URL", "TELEGRAM_BOT_TOKEN")


def missing_settings(names=REQUIRED_SETTINGS):
    """Return the required settings that are unset or empty."""
    return [name for name in names if not globals().get(name)]
