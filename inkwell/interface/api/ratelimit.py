"""Request throttling.

Clients are keyed by remote address. Limits come from ``Settings.rate_limit``
and are read once at import.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from inkwell.config import Settings

rate_limit_settings = Settings().rate_limit

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=rate_limit_settings.storage_uri,
    enabled=rate_limit_settings.enabled,
)
