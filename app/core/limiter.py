"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Central limit strings and decorators keep
rate limits DRY.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.constants import RATE_LIMIT_GUEST_REQUESTS

limiter = Limiter(key_func=get_remote_address)

WRITE_ENDPOINT_LIMIT = "120/minute"

limit_guest_requests = limiter.limit(RATE_LIMIT_GUEST_REQUESTS)
limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
