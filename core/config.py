from dotenv import load_dotenv
import os

load_dotenv()

# Database configuration from environment variables.
# DATABASE_URL wins; otherwise the MySQL settings build a PyMySQL URL.
DATABASE_URL = os.getenv("DATABASE_URL")

MYSQL_USER = os.getenv("MYSQL_USER", "schema_studio")
MYSQL_PASSWORD = os.getenv("MYSQL_PASSWORD")
MYSQL_HOST = os.getenv("MYSQL_HOST", "localhost")
MYSQL_PORT = os.getenv("MYSQL_PORT", "3306")
MYSQL_DB = os.getenv("MYSQL_DB", "schema_studio")

ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Seconds the insights chat waits before replying
INSIGHTS_REPLY_DELAY = float(os.getenv("INSIGHTS_REPLY_DELAY", "1.0"))

# Default base URL for the HTTP client and CLI
SCHEMA_STUDIO_URL = os.getenv("SCHEMA_STUDIO_URL", "http://localhost:8000")

# Pagination
DEFAULT_PAGE_SIZE = 100
MAX_PAGE_SIZE = 1000


def get_database_url() -> str:
    if DATABASE_URL:
        return DATABASE_URL
    if not MYSQL_PASSWORD:
        raise ValueError("Neither DATABASE_URL nor MYSQL_PASSWORD environment variable is set!")
    return f"mysql+pymysql://{MYSQL_USER}:{MYSQL_PASSWORD}@{MYSQL_HOST}:{MYSQL_PORT}/{MYSQL_DB}"


def get_allowed_origins() -> list:
    if ALLOWED_ORIGINS == "*":
        return ["*"]
    return [origin.strip() for origin in ALLOWED_ORIGINS.split(",") if origin.strip()]
