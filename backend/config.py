"""
Application configuration.

Values come from the environment (a local .env is loaded by main.py).

  SESSION_IDLE_TIMEOUT=10          # seconds a session may sit idle
  SESSION_COOKIE_NAME=appstate_session
  LOG_LEVEL=INFO
"""

import os

SESSION_IDLE_TIMEOUT = float(os.environ.get("SESSION_IDLE_TIMEOUT", "10"))
SESSION_COOKIE_NAME = os.environ.get("SESSION_COOKIE_NAME", "appstate_session")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Session keys
REQUEST_ENTRIES_KEY = "RequestEntries"
START_TIME_KEY = "StartTime"
