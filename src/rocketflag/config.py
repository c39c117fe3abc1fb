"""rocketflag クライアント設定"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlparse

from .exceptions import ValidationError

DEFAULT_API_URL = "https://api.rocketflag.app"
DEFAULT_VERSION = "v1"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class RocketFlagConfig:
    """クライアント設定。生成後は変更できない。"""

    version: str = DEFAULT_VERSION
    api_url: str = DEFAULT_API_URL
    timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not isinstance(self.version, str) or not self.version:
            raise ValidationError("version", "version must be a non-empty string")
        parsed = urlparse(self.api_url) if isinstance(self.api_url, str) else None
        if parsed is None or not parsed.scheme or not parsed.netloc:
            raise ValidationError("api_url", f"Invalid URL: {self.api_url}")
        try:
            port = parsed.port
        except ValueError as e:
            raise ValidationError("api_url", f"Invalid port in URL: {self.api_url}") from e
        if port == 0:
            raise ValidationError("api_url", f"Invalid port in URL: {self.api_url}")
        # frozen なので object.__setattr__ で正規化する
        object.__setattr__(self, "api_url", self.api_url.rstrip("/"))
