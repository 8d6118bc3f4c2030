import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

GREETING_MODES = ("validating", "static")
ALLOWED_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration loaded from environment variables."""

    service_name: str
    environment: str
    log_level: str
    metrics_namespace: str

    # --- Greeting behaviour ---
    greeting_mode: str
    release_version: str
    static_greeting: str | None = None

    @property
    def validates_input(self) -> bool:
        return self.greeting_mode == "validating"

    @classmethod
    def load_from_env(cls) -> "AppConfig":
        """
        Loads configuration from environment variables, performing validation.
        Fails fast with a ConfigurationError if anything is invalid.
        """
        try:
            service_name = os.getenv("SERVICE_NAME", "greeter").strip()
            if not service_name:
                raise ValueError("SERVICE_NAME must not be empty.")

            environment = os.getenv("ENVIRONMENT", "dev").strip()
            if not environment:
                raise ValueError("ENVIRONMENT must not be empty.")

            metrics_namespace = os.getenv("METRICS_NAMESPACE", "Greeter").strip()
            if not metrics_namespace:
                raise ValueError("METRICS_NAMESPACE must not be empty.")

            log_level = os.getenv("LOG_LEVEL", "INFO").upper()
            if log_level not in ALLOWED_LOG_LEVELS:
                raise ValueError(
                    f"LOG_LEVEL must be one of {ALLOWED_LOG_LEVELS}, not '{log_level}'"
                )

            greeting_mode = os.getenv("GREETING_MODE", "validating").strip().lower()
            if greeting_mode not in GREETING_MODES:
                raise ValueError(
                    f"GREETING_MODE must be one of {list(GREETING_MODES)}, not '{greeting_mode}'"
                )

            release_version = os.getenv("RELEASE_VERSION", "1.1.2").strip()
            if not release_version:
                raise ValueError("RELEASE_VERSION must not be empty.")

            # An empty override means "use the built-in text".
            static_greeting = os.getenv("STATIC_GREETING") or None

        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for an environment variable: {e}"
            ) from e

        return cls(
            service_name=service_name,
            environment=environment,
            log_level=log_level,
            metrics_namespace=metrics_namespace,
            greeting_mode=greeting_mode,
            release_version=release_version,
            static_greeting=static_greeting,
        )


# --- Singleton Factory Function (Lazy-loaded and Cached) ---
@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Loads the application configuration from environment variables.
    The result is cached, so the environment is only read once per cold start.
    """
    logger.info("Loading application configuration from environment...")
    return AppConfig.load_from_env()
