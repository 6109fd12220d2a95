import os


def _split_codes(value: str) -> tuple:
    return tuple(code.strip().upper() for code in value.split(",") if code.strip())


def get_settings_module() -> str:
    # APP_ENV selects the settings module; defaults to development
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"
