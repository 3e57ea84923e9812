"""Application configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Paths
BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / "data"
DB_PATH = DATA_DIR / "fixed_income.db"
SEED_FILE = Path(os.getenv("SEED_FILE", str(DATA_DIR / "seed_snapshots.json")))

# Ensure directories exist
DATA_DIR.mkdir(exist_ok=True)

# Database
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DB_PATH}")

# Products listing
PAGE_SIZE = 5
SEARCH_DEBOUNCE_SECONDS = 0.5
DUE_DATE_FORMAT = "%d/%m/%Y"  # dd/MM/yyyy
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "R$")

# Sort selector options: value -> label
SORT_OPTIONS: dict[str, str] = {
    "name": "Name",
    "valueApplied": "Amount Invested",
    "dueDate": "Due Date",
}

# Sidebar navigation tree (item -> sub-items)
SIDEBAR_ITEMS: list[dict] = [
    {
        "title": "Investments",
        "icon": "account_balance",
        "sub_items": [
            {"title": "Fixed Income", "path": "/fixed-income"},
            {"title": "Overview", "path": "/"},
        ],
    },
    {
        "title": "Reports",
        "icon": "insert_chart",
        "sub_items": [],
    },
]

# App settings
APP_TITLE = "Fixed Income Dashboard"
APP_PORT = int(os.getenv("APP_PORT", "8080"))
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
