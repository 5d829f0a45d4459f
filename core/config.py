# =============================================================================
# core/config.py  —  Environment Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the Retool connection settings from the environment.
#
#     RETOOL_URL              → base URL of the Retool instance
#                               (default: https://retool.example.com)
#     RETOOL_API_KEY          → API token, sent as a Bearer token
#     RETOOL_TIMEOUT_SECONDS  → per-request timeout (default: 30)
#
#   Entry points (tools/mcp_server.py, main.py) call load_dotenv() first,
#   so a .env file in the project root works the same as real env vars.
#
# A MISSING API KEY IS NOT FATAL:
#   The server still starts and lists its tools.  Every call will come back
#   from Retool as a 401, which the agent sees as a normal error envelope.
# =============================================================================

from dataclasses import dataclass
import logging
import os

from core.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_RETOOL_URL = "https://retool.example.com"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass
class RetoolSettings:
    """Connection settings for one Retool instance."""

    base_url: str = DEFAULT_RETOOL_URL
    api_key: str = ""
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self):
        self.base_url = self.base_url.rstrip("/")

    @classmethod
    def from_env(cls) -> "RetoolSettings":
        """Build settings from RETOOL_* environment variables.

        Raises:
            ConfigurationError: if RETOOL_TIMEOUT_SECONDS is not a positive number.
        """
        raw_timeout = os.environ.get("RETOOL_TIMEOUT_SECONDS", "")
        timeout = DEFAULT_TIMEOUT_SECONDS
        if raw_timeout.strip():
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"RETOOL_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}"
                ) from None
            if timeout <= 0:
                raise ConfigurationError(
                    f"RETOOL_TIMEOUT_SECONDS must be positive, got {raw_timeout!r}"
                )

        settings = cls(
            base_url=os.environ.get("RETOOL_URL") or DEFAULT_RETOOL_URL,
            api_key=os.environ.get("RETOOL_API_KEY", ""),
            timeout_seconds=timeout,
        )
        if not settings.api_key:
            logger.warning("RETOOL_API_KEY environment variable is not set")
        return settings
