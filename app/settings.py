import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")


def env_non_negative_int(name: str, default: int) -> int:
    """Read an integer setting, rejecting values below zero."""
    value = int(os.getenv(name, str(default)))
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() in ("1", "true", "yes")
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")

# --- Analysis ---
# How many best-selling SKUs each seller report lists.
TOP_PRODUCTS_LIMIT = env_non_negative_int("TOP_PRODUCTS_LIMIT", 10)

# --- Demo data ---
SEED_ON_STARTUP = os.getenv("SEED_ON_STARTUP", "true").lower() in ("1", "true", "yes")
SEED = int(os.getenv("SEED", "42"))
