"""Application configuration.

Values come from environment variables (a local `.env` file is loaded first)
so the dashboard can run unchanged on a laptop or inside a container.
"""
import os
from dotenv import load_dotenv

load_dotenv()

_BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Directory for the local storage file (auth session, preferences)
DATA_DIR = os.getenv("ADMIN_DASHBOARD_DATA_DIR", os.path.join(_BASE_DIR, 'data'))

# Seconds to wait in mock network calls (login, signup, profile update)
SIMULATED_DELAY = float(os.getenv("ADMIN_DASHBOARD_SIMULATED_DELAY", "1.0"))

# Number of mock records generated per collection at session start
SEED_COUNT = int(os.getenv("ADMIN_DASHBOARD_SEED_COUNT", "8"))

LOG_LEVEL = os.getenv("ADMIN_DASHBOARD_LOG_LEVEL", "INFO").upper()

# Max entries kept in the recent activity feed
ACTIVITY_LIMIT = int(os.getenv("ADMIN_DASHBOARD_ACTIVITY_LIMIT", "50"))
