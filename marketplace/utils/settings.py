# marketplace/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


STORE_BACKEND = os.getenv("STORE_BACKEND", "memory")  # memory | redis | sql
STORE_NAMESPACE = os.getenv("STORE_NAMESPACE", "ecofinds")
REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///marketplace.db")
SEED_DEMO_DATA = _flag("SEED_DEMO_DATA", "true")
MARK_SOLD_ON_CHECKOUT = _flag("MARK_SOLD_ON_CHECKOUT", "false")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")  # text | json
