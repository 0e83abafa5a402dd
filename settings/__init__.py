"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path("logs")

# API
API_BASE_URL = os.getenv("EONET_API_URL", "https://eonet.gsfc.nasa.gov/api/v2.1")
API_TIMEOUT = int(os.getenv("EONET_API_TIMEOUT", "60"))
API_RETRIES = int(os.getenv("EONET_API_RETRIES", "1"))

# Fetch
MAX_CONCURRENT = 20
DEFAULT_LOOKBACK_DAYS = 360
