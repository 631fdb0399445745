"""Configuration: env, data paths, API host/port, web origin."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of acappella package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so ACAPPELLA_* overrides are set
load_dotenv(BASE_DIR / ".env")

DATA_DIR = Path(os.getenv("ACAPPELLA_DATA_DIR", str(BASE_DIR / "data")))
RECORDS_PATH = DATA_DIR / "records.json"

# API
API_HOST = os.getenv("ACAPPELLA_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("ACAPPELLA_API_PORT", "8000"))
API_RELOAD = os.getenv("ACAPPELLA_API_RELOAD", "0").lower() in ("1", "true", "yes")

# Site front end (e.g. http://localhost:5173 for Vite dev); empty allows any origin
WEB_ORIGIN = os.getenv("ACAPPELLA_WEB_ORIGIN", "")

# Donation presets offered by the donation form (KES)
DONATION_PRESET_AMOUNTS = (500, 1000, 2000, 5000)


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
