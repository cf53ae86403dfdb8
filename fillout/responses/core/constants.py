"""Shared limits of the submissions API and the filtered endpoint."""

# The remote API serves at most 150 submissions per request.
PAGE_SIZE = 150

# Inbound `limit` is bounded to the same page size.
MAX_LIMIT = PAGE_SIZE
DEFAULT_LIMIT = PAGE_SIZE

DEFAULT_CACHE_SIZE = 10
DEFAULT_BASE_URL = "https://api.fillout.com/v1/api"
DEFAULT_TIMEOUT = 30.0

FETCH_FAILED_MESSAGE = "Request failed!"
