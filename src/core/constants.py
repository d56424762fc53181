"""Application constants and configuration values."""

from core.config import FRONTEND_URL

# Database field lengths
SESSION_KEY_LENGTH = 64

# Database connection settings
DB_POOL_RECYCLE_SECONDS = 300  # 5 minutes

# CORS origins for development and production
# Note: production URLs should be added via FRONTEND_URL environment variable
_CORS_ORIGINS_RAW = [
    "http://localhost:3000",      # Next.js dev server
    FRONTEND_URL,
]

# Filter out None values and empty strings to avoid CORS errors
CORS_ORIGINS = [origin for origin in dict.fromkeys(_CORS_ORIGINS_RAW) if origin and origin.strip()]

# Symptom matching
MAX_CONDITION_RESULTS = 3
MATCH_COUNT_BONUS = 0.1  # Added per matched symptom on top of the coverage ratio
HIGH_MATCH_THRESHOLD = 0.7
MEDIUM_MATCH_THRESHOLD = 0.4

# Conversation snapshot persistence
SNAPSHOT_SCHEMA_VERSION = 1
CHATBOT_SESSION_EXPIRY_HOURS = 72  # Snapshots untouched for 3 days are purged

# Cosmetic typing pauses (milliseconds) shown before each bot message
TYPING_DELAY_WELCOME_MS = 500
TYPING_DELAY_QUESTION_MS = 600
TYPING_DELAY_STEP_MS = 500
TYPING_DELAY_CORRECTION_MS = 400
TYPING_DELAY_RESULTS_MS = 600
TYPING_DELAY_DISCLAIMER_MS = 400
