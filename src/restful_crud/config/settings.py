"""
Environment-driven harness configuration
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_BASE_URL = "https://api.restful-api.dev"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUE_VALUES


@dataclass
class HarnessConfig:
    """Objects API testing configuration"""

    # Remote API
    api_base_url: str = field(default_factory=lambda: os.getenv("OBJECTS_API_BASE_URL", DEFAULT_BASE_URL))
    request_timeout: float = field(default_factory=lambda: float(os.getenv("OBJECTS_API_TIMEOUT", "30.0")))

    # Scenario expectations
    list_min_count: int = field(default_factory=lambda: int(os.getenv("OBJECTS_LIST_MIN_COUNT", "13")))

    # Ordering
    priority_strict: bool = field(default_factory=lambda: env_flag("PRIORITY_STRICT"))

    # Test selection
    run_live: bool = field(default_factory=lambda: env_flag("RUN_LIVE_API_TESTS"))

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append(f"OBJECTS_API_BASE_URL must be an http(s) URL, got {self.api_base_url!r}")

        if self.request_timeout <= 0:
            errors.append("OBJECTS_API_TIMEOUT must be positive")

        if self.list_min_count < 0:
            errors.append("OBJECTS_LIST_MIN_COUNT must not be negative")

        if logging.getLevelName(self.log_level) == f"Level {self.log_level}":
            errors.append(f"LOG_LEVEL {self.log_level!r} is not a logging level")

        return errors


def get_config() -> HarnessConfig:
    """Get validated harness configuration"""
    try:
        config = HarnessConfig()
    except ValueError as e:
        raise ValueError(f"Configuration errors: {e}") from e
    errors = config.validate()

    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")

    return config
