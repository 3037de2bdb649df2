"""Runtime configuration defaults for the API client, logging and pricing."""

from __future__ import annotations

import os

API_BASE_URL = os.environ.get("FOODORDER_API_URL", "http://localhost:3333").strip()
API_TIMEOUT_SECONDS = float(os.environ.get("FOODORDER_API_TIMEOUT", "10"))

DEBUG_LOG_PATH = os.environ.get("FOODORDER_DEBUG_LOG", "/tmp/foodorder-debug.log")

# Brazilian Real, matching the catalog served by the API.
CURRENCY_SYMBOL = "R$"
THOUSANDS_SEPARATOR = "."
DECIMAL_SEPARATOR = ","
