import os
from dotenv import load_dotenv

load_dotenv()

# --- Cache (milliseconds) ---
CACHE_DEFAULT_TTL_MS = int(os.getenv("CACHE_DEFAULT_TTL_MS", 300000))      # 5 minutes
CACHE_SWEEP_INTERVAL_MS = int(os.getenv("CACHE_SWEEP_INTERVAL_MS", 600000))  # 10 minutes

# --- Sales summaries ---
DEFAULT_SALES_WINDOW_DAYS = 7
MAX_SALES_WINDOW_DAYS = 90

# --- Server ---
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
PORT = int(os.getenv("PORT", 8000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
