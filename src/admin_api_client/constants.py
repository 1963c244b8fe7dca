from typing import Tuple

from ._version import __version__

CLIENT = "Admin API Client"
DEFAULT_CLIENT_VERSION = __version__

DEFAULT_CONTENT_TYPE = "application/json"
ACCESS_TOKEN_HEADER = "X-Shopify-Access-Token"
DEPRECATION_HEADER = "X-Shopify-API-Deprecated-Reason"

MIN_RETRIES = 0
MAX_RETRIES = 3

# Seconds
DEFAULT_RETRY_WAIT_TIME = 1.0
DEFAULT_TIMEOUT = 10.0

RETRIABLE_STATUS_CODES: Tuple[int, ...] = (429, 500, 503)

UNSTABLE_API_VERSION = "unstable"
