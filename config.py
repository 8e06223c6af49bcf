# config.py
"""All configuration constants for the advocate directory."""

import os
from dotenv import load_dotenv

load_dotenv()

# Data
DATA_DIR = os.environ.get("ADVOCATE_DATA_DIR", "./data")
ADVOCATES_PATH = os.environ.get(
    "ADVOCATES_PATH", os.path.join(DATA_DIR, "advocates.json")
)
FEEDBACK_DIR = os.environ.get("FEEDBACK_DIR", os.path.join(DATA_DIR, "feedback"))

# Ranking
MAX_RECOMMENDATIONS = 3        # advocates returned per search
TOP_RATED_LIMIT = 5
SYNTH_RATING_MIN = 3           # filler rating range for unrated advocates
SYNTH_RATING_MAX = 5
SYNTH_REVIEWS_MIN = 1
SYNTH_REVIEWS_MAX = 10

# Text generation (Gemini REST API; unset key -> canned answers only)
GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY")
GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-1.5-flash-8b")
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
MAX_CONCURRENT = 3             # simultaneous generation requests
MAX_RETRIES = 3
RETRY_BACKOFF_BASE = 2.0       # exponential: 2s -> 4s -> 8s

# Onboarding form minimum lengths
MIN_NAME_LENGTH = 2
MIN_REG_NO_LENGTH = 5
MIN_ADDRESS_LENGTH = 5

# Output
OUTPUT_DIR = "./output"
CSV_ENCODING = "utf-8-sig"

# Timeouts
REQUEST_TIMEOUT = 30           # seconds
