"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("CLUBVOTE_DB_PATH", "clubvote.duckdb")

# Logging
LOG_DIR = Path(os.getenv("CLUBVOTE_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("CLUBVOTE_LOG_LEVEL", "INFO")
LOG_RETENTION = "7 days"

# Authorization
ADMIN_IDS = {int(i) for i in os.getenv("CLUBVOTE_ADMIN_IDS", "").split(",") if i.strip()}

# Validation
TITLE_MIN_LENGTH = 3

# Reminders
REMINDER_HORIZON_HOURS = 24
