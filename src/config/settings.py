"""Centralized configuration settings."""
from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class ServerSettings:
    """Settings for the HTTP listener."""
    host: str = "0.0.0.0"
    port: int = 80
    # Only very small requests are served; idle connections are dropped quickly
    timeout: int = 5  # seconds


@dataclass
class TranslationSettings:
    """Settings for the localized index documents."""
    directory: str = "translations"
    pattern: str = "*.html"
    # Served when no requested language matches; must exist as <fallback>.html
    fallback_locale: str = "en"


@dataclass
class Settings:
    """Main application settings container."""
    server: ServerSettings = field(default_factory=ServerSettings)
    translations: TranslationSettings = field(default_factory=TranslationSettings)

    # Application settings
    web_root: str = "."
    log_level: str = "INFO"
    debug: bool = False

    def __post_init__(self):
        """Load settings from environment variables."""
        self.debug = os.environ.get("SCREENSY_DEBUG", "").lower() in ("true", "1", "yes")
        self.web_root = os.environ.get("SCREENSY_WEB_ROOT", self.web_root)
        self.log_level = os.environ.get("SCREENSY_LOG_LEVEL", self.log_level).upper()
        if self.debug:
            self.log_level = "DEBUG"

        # Server overrides
        if host := os.environ.get("SCREENSY_HOST"):
            self.server.host = host
        if port := os.environ.get("SCREENSY_PORT"):
            self.server.port = int(port)
        if timeout := os.environ.get("SCREENSY_TIMEOUT"):
            self.server.timeout = int(timeout)

        # Translation overrides
        if directory := os.environ.get("SCREENSY_TRANSLATIONS_DIR"):
            self.translations.directory = directory
        if pattern := os.environ.get("SCREENSY_TRANSLATIONS_PATTERN"):
            self.translations.pattern = pattern
        if fallback := os.environ.get("SCREENSY_FALLBACK_LOCALE"):
            self.translations.fallback_locale = fallback


# Global settings instance
settings = Settings()
