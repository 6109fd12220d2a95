import os

from config import _split_codes

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "pontaj_db"),
}

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Departments, shift presets and the predefined roster
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "0")))

# Report: departments counted as direct labor, the rest is indirect
DIRECT_LABOR_DEPARTMENTS = _split_codes(os.getenv("DIRECT_LABOR_DEPARTMENTS", "DC,FA"))
# "standard" (30 min over 6h) or "legacy" (30 min over 5h)
BREAK_POLICY = os.getenv("BREAK_POLICY", "standard")
COUNT_ZERO_HOUR_PRESENT = bool(int(os.getenv("COUNT_ZERO_HOUR_PRESENT", "0")))

HOLIDAY_API_URL = os.getenv("HOLIDAY_API_URL", "https://date.nager.at/api/v3/PublicHolidays/{year}/{country}")
HOLIDAY_COUNTRY = os.getenv("HOLIDAY_COUNTRY", "RO")
HOLIDAY_API_TIMEOUT = float(os.getenv("HOLIDAY_API_TIMEOUT", "10"))
