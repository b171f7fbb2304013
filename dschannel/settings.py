"""Channel settings loaded from the settings file and environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dschannel.store import CONFIG_DIR, JSONFileStore

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT = 10


def _default_fanout_workers() -> int:
    return min(32, (os.cpu_count() or 1) + 4)


def _resolve_settings_path() -> Path:
    override = os.environ.get("DSCHANNEL_SETTINGS_PATH", "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "settings.json"


class SettingsStore(JSONFileStore):
    """Store for reading channel settings.

    Settings are stored as a JSON object in ~/.dschannel/settings.json
    """

    def __init__(self, file_path: Path | None = None) -> None:
        super().__init__(file_path or _resolve_settings_path())

    def load_all(self) -> dict[str, Any]:
        """Load all settings.

        Returns:
            Dictionary of settings, or empty dict if none exist.
        """
        data = self._read_json()
        return data if isinstance(data, dict) else {}


@dataclass(frozen=True)
class ChannelSettings:
    """Runtime knobs shared by every channel.

    Attributes:
        fanout_workers: Size of the shared worker pool used by multi-table fetches.
        connect_timeout: Seconds a driver may spend establishing a connection.
    """

    fanout_workers: int
    connect_timeout: int


def _positive_int(raw: Any, name: str, default: int) -> int:
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring invalid {name} setting: {raw!r}")
        return default
    if value <= 0:
        logger.warning(f"Ignoring non-positive {name} setting: {value}")
        return default
    return value


def load_channel_settings(store: SettingsStore | None = None) -> ChannelSettings:
    """Resolve settings, letting environment variables win over the file."""
    data = (store or SettingsStore()).load_all()
    workers = os.environ.get("DSCHANNEL_FANOUT_WORKERS") or data.get("fanout_workers")
    timeout = os.environ.get("DSCHANNEL_CONNECT_TIMEOUT") or data.get("connect_timeout")
    return ChannelSettings(
        fanout_workers=_positive_int(workers, "fanout_workers", _default_fanout_workers()),
        connect_timeout=_positive_int(timeout, "connect_timeout", DEFAULT_CONNECT_TIMEOUT),
    )
