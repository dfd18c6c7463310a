import os

APP_NAME = "Task Management API"
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

# CORS
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Store
SEED_SAMPLE_DATA = os.getenv("SEED_SAMPLE_DATA", "true").strip().lower() in {"1", "true", "yes", "on"}

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE") or None

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
