"""HTTP – httpx transport with tenacity-backed retries."""
from airship_push.http.client import AirshipClient
from airship_push.http.retry import TenacityRetryPolicy, is_retryable

__all__ = ["AirshipClient", "TenacityRetryPolicy", "is_retryable"]
