# srcomp_client/config.py
"""
Configuration for the SRComp client.

This module centralizes the tunable settings (API root, request timeout and
User-Agent). Every value can be overridden from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
import os


DEFAULT_API_ROOT = "https://studentrobotics.org/comp-api"


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, returning default on missing/invalid values."""
    try:
        return int(os.getenv(name, str(default)))
    except (TypeError, ValueError):
        return default


def _env_str(name: str, default: str) -> str:
    """Read a string environment variable; blank values fall back to default."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable client configuration.

    Notes:
      - api_root is used verbatim; supply it without a trailing slash.
      - timeout_seconds is handed to the HTTP transport, the client itself
        never times anything out.
    """

    api_root: str = DEFAULT_API_ROOT
    timeout_seconds: int = 10
    user_agent: str = "srcomp-client/1.0"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Build a config from environment variables.

        Supported env options:
          - SRCOMP_API_ROOT
          - SRCOMP_TIMEOUT_SECONDS (int, invalid values ignored)
          - SRCOMP_USER_AGENT
        """
        defaults = cls()
        timeout = _env_int("SRCOMP_TIMEOUT_SECONDS", defaults.timeout_seconds)
        if timeout <= 0:
            timeout = defaults.timeout_seconds
        return cls(
            api_root=_env_str("SRCOMP_API_ROOT", defaults.api_root),
            timeout_seconds=timeout,
            user_agent=_env_str("SRCOMP_USER_AGENT", defaults.user_agent),
        )
