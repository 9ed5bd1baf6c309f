"""modelcurl.config.defaults
=========================

Central place for small, stable default values used across modelcurl. They
can be overridden through ``modelcurl.config.get_settings`` (config file,
environment, explicit overrides) but provide fallbacks for local use and
tests.

Only plain constants live here so any layer can import this module without
creating cycles.
"""

from __future__ import annotations

# ---- Request defaults (match the desktop editor) ----
DEFAULT_ENDPOINT_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 0.0
DEFAULT_MAX_TOKENS = 2048
DEFAULT_STREAM = True

# ---- Persistence ----
# Directory name created under the platform config dir.
DATA_DIR_NAME = "modelcurl"
ENDPOINTS_FILE_NAME = "endpoints.json"
HISTORY_FILE_NAME = "history.json"
# Newest entries kept when appending to history.
HISTORY_DEFAULT_LIMIT = 100

# ---- Bridge ----
# Worker threads used when checking several endpoints at once.
CONNECTION_TEST_DEFAULT_PARALLEL = 4

# ---- Service / HTTP layer ----
SERVICE_DEFAULT_HOST = "127.0.0.1"
SERVICE_DEFAULT_PORT = 8091
# Comma-separated list of allowed origins for the dev server (Vite UI).
SERVICE_CORS_DEFAULT_ORIGINS = "http://localhost:1420,http://localhost:5173,http://127.0.0.1:5173"

# ---- Logging ----
LOG_DEFAULT_LEVEL = "INFO"
LOG_DEFAULT_JSON = True
