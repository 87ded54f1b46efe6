"""
Configuration: environment variables and logging setup.

All settings are read from the environment once, at application start.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from utils.validation import validate_base_url


DEFAULT_API_URL = "https://smart-faq-worker.fpl-test.workers.dev"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7860

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def env(name: str, default: str = "") -> str:
    v = os.getenv(name, default)
    return v.strip() if isinstance(v, str) else v


def parse_timeout(raw: str) -> Optional[float]:
    """
    Parse a timeout setting.
    
    Empty, "0" and "none" disable the timeout (the client then waits for
    the service indefinitely).
    
    Raises:
        ValueError: If raw is not a number or is negative
    """
    if not raw or raw.lower() == "none":
        return None
    
    seconds = float(raw)
    if seconds < 0:
        raise ValueError(f"超时时间不能为负数: {raw}")
    if seconds == 0:
        return None
    return seconds


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings.
    
    Attributes:
        api_url: Base address of the FAQ service (no trailing slash)
        timeout: Request timeout in seconds, None for no timeout
        log_level: Logging level name
        host: Gradio bind host
        port: Gradio bind port
    """
    
    api_url: str = DEFAULT_API_URL
    timeout: Optional[float] = None
    log_level: str = "INFO"
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


def load_settings() -> Settings:
    """
    Build Settings from FAQ_ADMIN_* environment variables.
    
    Raises:
        ValueError: If the API URL, timeout or port is invalid
    """
    api_url = env("FAQ_ADMIN_API_URL", DEFAULT_API_URL).rstrip("/")
    is_valid, error_msg = validate_base_url(api_url)
    if not is_valid:
        raise ValueError(error_msg)
    
    return Settings(
        api_url=api_url,
        timeout=parse_timeout(env("FAQ_ADMIN_TIMEOUT")),
        log_level=env("FAQ_ADMIN_LOG_LEVEL", "INFO").upper(),
        host=env("FAQ_ADMIN_HOST", DEFAULT_HOST),
        port=int(env("FAQ_ADMIN_PORT", str(DEFAULT_PORT)))
    )


def configure_logging(level: str = "INFO"):
    """Configure root logging once for the whole process."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
