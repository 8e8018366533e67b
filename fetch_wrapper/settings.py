"""Environment-driven configuration for the default transport."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Container for transport configuration."""

    base_url: str = ""
    timeout: float = 30.0
    follow_redirects: bool = False

    @classmethod
    def load(cls) -> "Settings":
        """
        Load configuration from environment variables.

        Python-dotenv is used so a local .env file can supply values without
        exporting them globally.
        """
        load_dotenv()

        base_url = os.getenv("FETCH_BASE_URL", "").strip()

        timeout_raw = os.getenv("FETCH_TIMEOUT", "").strip() or "30"
        try:
            timeout = float(timeout_raw)
        except ValueError as exc:
            raise ValueError("FETCH_TIMEOUT must be a numeric value.") from exc
        if timeout <= 0:
            raise ValueError("FETCH_TIMEOUT must be greater than zero.")

        redirects_raw = os.getenv("FETCH_FOLLOW_REDIRECTS", "").strip().lower() or "false"
        if redirects_raw in _TRUTHY:
            follow_redirects = True
        elif redirects_raw in _FALSY:
            follow_redirects = False
        else:
            raise ValueError("FETCH_FOLLOW_REDIRECTS must be a boolean value.")

        return cls(
            base_url=base_url,
            timeout=timeout,
            follow_redirects=follow_redirects,
        )
