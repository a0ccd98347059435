import os
from pathlib import Path
from dotenv import find_dotenv, load_dotenv

# --- Working Directory ---
# Relative paths resolve against the directory the session starts in.
WORK_DIR = Path.cwd()

# --- Load Environment Variables ---
load_dotenv(find_dotenv(usecwd=True))

# --- Menu Configuration ---
# "full" offers update and delete; "basic" only add, view and exit.
MENU_VARIANTS = ("full", "basic")
MENU_VARIANT = os.getenv("STOCK_MENU_VARIANT", "full").strip().lower()
if MENU_VARIANT not in MENU_VARIANTS:
    MENU_VARIANT = "full"

# --- Logging Configuration ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = WORK_DIR / os.getenv("LOG_DIR", "logs")
LOG_FILENAME = "stock.log"
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").strip().lower() in ("1", "true", "yes")

# --- Display ---
CURRENCY_SYMBOL = "$"
LIST_DIVIDER = "-" * 20
