"""
Shared constants.

This module has no dependencies on models or services to avoid circular imports.
"""

# Candidates fetched from the catalog per requested body part
CANDIDATES_PER_BODY_PART = 5

# Body part value the catalog uses for cardio movements
CARDIO_BODY_PART = "cardio"

# Difficulty bucket used when a level is not recognised
DEFAULT_DIFFICULTY_BUCKET = "intermediate"

# Session timer defaults (seconds)
COUNTDOWN_SECONDS = 3
DEFAULT_EXERCISE_SECONDS = 30
TICK_INTERVAL_SECONDS = 1.0

# Coach chat input limits
MAX_CHAT_MESSAGE_LENGTH = 1000
MAX_CHAT_HISTORY = 20
