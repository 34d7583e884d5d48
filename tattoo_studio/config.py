# tattoo_studio/config.py

import os
import warnings
from pathlib import Path

from dotenv import load_dotenv

# .env at the project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./tattoo_studio.db")

SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    warnings.warn("SECRET_KEY not set, using an insecure development key", RuntimeWarning, stacklevel=2)
    SECRET_KEY = "insecure-dev-key-change-me"

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))

# wall-clock hours of chairs and appointments are in this zone
STUDIO_TIMEZONE = os.getenv("STUDIO_TIMEZONE", "Europe/Athens")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

SEED_CHAIRS = os.getenv("SEED_CHAIRS", "true").lower() == "true"
