import os

from config import _split_codes

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "pontaj_test"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_JSON = False

DIRECT_LABOR_DEPARTMENTS = _split_codes(os.getenv("DIRECT_LABOR_DEPARTMENTS", "DC,FA"))
BREAK_POLICY = os.getenv("BREAK_POLICY", "standard")
COUNT_ZERO_HOUR_PRESENT = bool(int(os.getenv("COUNT_ZERO_HOUR_PRESENT", "0")))

HOLIDAY_API_URL = os.getenv("HOLIDAY_API_URL", "https://date.nager.at/api/v3/PublicHolidays/{year}/{country}")
HOLIDAY_COUNTRY = os.getenv("HOLIDAY_COUNTRY", "RO")
HOLIDAY_API_TIMEOUT = float(os.getenv("HOLIDAY_API_TIMEOUT", "2"))
