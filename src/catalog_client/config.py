import os
import logging
from typing import Optional, Union

logger = logging.getLogger(__name__)

SMARTBLOCKS_API_URL_ENV_VAR = "SMARTBLOCKS_API_URL"
SMARTBLOCKS_TIMEOUT_SECONDS_ENV_VAR = "SMARTBLOCKS_TIMEOUT_SECONDS"

DEFAULT_BASE_URL = "https://lambda.roamjs.com"
DEFAULT_TIMEOUT_SECONDS = 30.0
STORE_ENDPOINT = "smartblocks-store"

def _get_env_var(name: str, default: Optional[str] = None) -> Optional[str]:
    """Helper to get an environment variable."""
    return os.getenv(name, default)

def get_base_url(base_url_override: Optional[str] = None) -> str:
    """Resolves the base URL. Prioritizes override, then environment variable, then default."""
    url = base_url_override or _get_env_var(SMARTBLOCKS_API_URL_ENV_VAR)
    return url or DEFAULT_BASE_URL

def get_timeout_seconds(timeout_override: Optional[Union[float, int]] = None) -> float:
    """Resolves the request timeout. Prioritizes override, then environment variable, then default."""
    if timeout_override is not None:
        try:
            val = float(timeout_override)
            if val <= 0:
                logger.warning(f"Invalid timeout_override value: {timeout_override}. Must be positive. Using default.")
            else:
                return val
        except (ValueError, TypeError):
            logger.warning(
                f"Invalid timeout_override value: {timeout_override}. Using default.",
                exc_info=True
            )

    env_timeout_str = _get_env_var(SMARTBLOCKS_TIMEOUT_SECONDS_ENV_VAR)
    if env_timeout_str:
        try:
            val = float(env_timeout_str)
            if val <= 0:
                logger.warning(
                    f"Invalid value for env var {SMARTBLOCKS_TIMEOUT_SECONDS_ENV_VAR}: {env_timeout_str}. "
                    "Must be positive. Using default timeout."
                )
            else:
                return val
        except ValueError:
            logger.warning(
                f"Invalid value for env var {SMARTBLOCKS_TIMEOUT_SECONDS_ENV_VAR}: "
                f"{env_timeout_str}. Using default timeout.",
                exc_info=True
            )
    return DEFAULT_TIMEOUT_SECONDS
