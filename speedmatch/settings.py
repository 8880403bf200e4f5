from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .exceptions import ConfigError
from .scoring import DEFAULT_CONFIG, MatchConfig


DEFAULT_CONNECTIONS_PATH = Path.home() / ".speedmatch" / "connections.json"
DEFAULT_QR_PREFIX = "XRNODE:"


def _int_env(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or not str(raw).strip():
        return default
    try:
        return int(str(raw).strip())
    except ValueError:
        raise ConfigError(f"{key} must be an integer", field=key, value=raw) from None


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the CLI and services.

    Fields:
        profiles_path: Attendee data file (.json/.csv); None uses the bundled sample.
        connections_path: JSON file backing the connection store.
        log_level: Level name passed to ``setup_logging``.
        qr_prefix: Prefix expected on scanned badge codes.
        excellent_threshold: Minimum score for the EXCELLENT tier.
        good_threshold: Minimum score for the GOOD tier.
    """

    profiles_path: Optional[Path] = None
    connections_path: Path = DEFAULT_CONNECTIONS_PATH
    log_level: str = "WARNING"
    qr_prefix: str = DEFAULT_QR_PREFIX
    excellent_threshold: int = DEFAULT_CONFIG.excellent_threshold
    good_threshold: int = DEFAULT_CONFIG.good_threshold

    def match_config(self) -> MatchConfig:
        return DEFAULT_CONFIG.with_thresholds(
            excellent=self.excellent_threshold, good=self.good_threshold
        )

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, dotenv: bool = True) -> "Settings":
        """Build settings from environment variables (after loading .env when asked)."""
        if env is None:
            if dotenv:
                load_dotenv()
            env = os.environ
        profiles = env.get("SPEEDMATCH_PROFILES")
        connections = env.get("SPEEDMATCH_CONNECTIONS")
        return cls(
            profiles_path=Path(profiles).expanduser() if profiles else None,
            connections_path=Path(connections).expanduser() if connections else DEFAULT_CONNECTIONS_PATH,
            log_level=env.get("SPEEDMATCH_LOG_LEVEL", "WARNING"),
            qr_prefix=env.get("SPEEDMATCH_QR_PREFIX", DEFAULT_QR_PREFIX),
            excellent_threshold=_int_env(env, "SPEEDMATCH_EXCELLENT", DEFAULT_CONFIG.excellent_threshold),
            good_threshold=_int_env(env, "SPEEDMATCH_GOOD", DEFAULT_CONFIG.good_threshold),
        )
