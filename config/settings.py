"""
Assistant configuration — loads overrides from .env file.
"""

import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

# ─────────────────────────────────────────────
# App Settings
# ─────────────────────────────────────────────
PORT = int(os.getenv("PORT", 5009))
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")

# ─────────────────────────────────────────────
# Durable Record Store
# ─────────────────────────────────────────────
STORE_BACKEND = os.getenv("STORE_BACKEND", "memory").lower()  # memory, json
STORE_DIR = os.getenv("STORE_DIR", "data")
STORE_KEY_PREFIX = os.getenv("STORE_KEY_PREFIX", "greenledger-")

# ─────────────────────────────────────────────
# Handler latency simulation
# ─────────────────────────────────────────────
SIMULATE_LATENCY = os.getenv("SIMULATE_LATENCY", "true").lower() == "true"
LATENCY_SCALE = float(os.getenv("LATENCY_SCALE", "1.0"))

# ─────────────────────────────────────────────
# Classification & Context
# ─────────────────────────────────────────────
CLASSIFIER_MIN_CONFIDENCE = float(os.getenv("CLASSIFIER_MIN_CONFIDENCE", "0.5"))
HISTORY_CONTEXT_WINDOW = int(os.getenv("HISTORY_CONTEXT_WINDOW", "3"))

# Fallback literals used when neither the message nor the profile says where
DEFAULT_REGION = "your region"
DEFAULT_AREA = "your area"
