import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def get_setting(key, default):
    """Environment variable wins over env.yaml; env strings are parsed as YAML scalars/lists."""
    raw = os.environ.get(key)
    if raw is None:
        return data.get(key, default)
    if isinstance(default, str):
        return raw
    return yaml.safe_load(raw)


class ApplicationConfig:
    DB_URI = get_setting("DB_URI", "sqlite+aiosqlite:///./actions.db")
    API_PREFIX = get_setting("API_PREFIX", "/v1")
    API_PORT = get_setting("API_PORT", 3000)
    API_HOST = get_setting("API_HOST", "0.0.0.0")
    ENVIRONMENT = get_setting("ENVIRONMENT", "development")
    CORS_ORIGINS = get_setting("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = bool(get_setting("CORS_ALLOW_CREDENTIALS", False))
    LOG_LEVEL = get_setting("LOG_LEVEL", "INFO")
    API_KEY = get_setting("API_KEY", "")
    AUTO_CREATE_TABLES = bool(get_setting("AUTO_CREATE_TABLES", True))
    DEFAULT_PERIOD_DAYS = int(get_setting("DEFAULT_PERIOD_DAYS", 30))
    VERSION = "1.0.0"
