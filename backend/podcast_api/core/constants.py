"""
Application Constants
Defines constant values used throughout the application.

This module contains:
- Rating bounds for podcasts
- User-facing error messages returned by the services
"""

# Podcast rating bounds (inclusive)
RATING_MIN = 1
RATING_MAX = 5

# Account messages
MSG_USER_EXISTS = "There is a user with that email already"
MSG_COULD_NOT_CREATE_ACCOUNT = "Could not create account"
MSG_USER_NOT_FOUND = "User not found"
MSG_WRONG_PASSWORD = "Wrong password"
MSG_USER_NOT_FOUND_BY_ID = "User Not Found"
MSG_COULD_NOT_UPDATE_PROFILE = "Could not update profile"

# Catalog messages
MSG_INTERNAL_ERROR = "Internal server error occurred."
MSG_INVALID_RATING = f"Rating must be between {RATING_MIN} and {RATING_MAX}."


def podcast_not_found(podcast_id: int) -> str:
    return f"Podcast with id {podcast_id} not found"


def episode_not_found(podcast_id: int, episode_id: int) -> str:
    return f"Episode with id {episode_id} not found in podcast with id {podcast_id}"
