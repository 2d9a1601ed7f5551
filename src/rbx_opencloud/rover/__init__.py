"""rover ID 連携サービス API."""

from .client import RoverClient
from .exceptions import ServiceError
from .models import RobloxInfo, RoverErrorPayload

__all__ = [
    "RoverClient",
    "RobloxInfo",
    "RoverErrorPayload",
    "ServiceError",
]
