"""Roblox Open Cloud client library."""

from .client import OpenCloud
from .config import (
    ClientConfig,
    LogSection,
    OpenCloudSection,
    RoverSection,
    load_config,
)
from .credential import Credential
from .exceptions import (
    BodyDecodeError,
    ConfigError,
    HeaderDecodeError,
    HttpStatusError,
    OpenCloudError,
    OpenCloudErrorCodes,
    TransportError,
)
from .logger import configure_logging
from .pager import Pager, PagerOptions
from .transport import AuthenticatedTransport, AuthScheme
from .types import GroupId, UniverseId

__all__ = [
    "OpenCloud",
    "Credential",
    "AuthenticatedTransport",
    "AuthScheme",
    "Pager",
    "PagerOptions",
    "UniverseId",
    "GroupId",
    "ClientConfig",
    "OpenCloudSection",
    "RoverSection",
    "LogSection",
    "load_config",
    "configure_logging",
    "OpenCloudError",
    "OpenCloudErrorCodes",
    "TransportError",
    "HttpStatusError",
    "HeaderDecodeError",
    "BodyDecodeError",
    "ConfigError",
]
