"""rocketflag client library."""

from .cache import CachedRocketFlagClient
from .client import RocketFlagClient
from .config import DEFAULT_API_URL, DEFAULT_VERSION, RocketFlagConfig
from .exceptions import (
    APIError,
    ContextFormatError,
    InvalidResponseError,
    NetworkError,
    RocketFlagError,
    RocketFlagErrorCodes,
    ValidationError,
)
from .factory import create_rocketflag_client
from .http_client import HttpRocketFlagClient
from .memory import InMemoryRocketFlagClient
from .models import FlagResult, FlagStatus, UserContext
from .request import build_flag_url
from .response import parse_flag_response
from .validate import is_flag_status

__all__ = [
    "APIError",
    "CachedRocketFlagClient",
    "ContextFormatError",
    "DEFAULT_API_URL",
    "DEFAULT_VERSION",
    "FlagResult",
    "FlagStatus",
    "HttpRocketFlagClient",
    "InMemoryRocketFlagClient",
    "InvalidResponseError",
    "NetworkError",
    "RocketFlagClient",
    "RocketFlagConfig",
    "RocketFlagError",
    "RocketFlagErrorCodes",
    "UserContext",
    "ValidationError",
    "build_flag_url",
    "create_rocketflag_client",
    "is_flag_status",
    "parse_flag_response",
]
