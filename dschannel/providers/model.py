"""Core provider model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

ConnectionParams = Mapping[str, str]


@dataclass
class TableField:
    """One column of a table as reported by the catalog."""

    name: str
    type: str
    comment: str | None = None
    nullable: bool = False
    primary_key: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "comment": self.comment,
            "nullable": self.nullable,
            "primaryKey": self.primary_key,
        }


@dataclass(frozen=True)
class ProviderSpec:
    plugin_name: str
    channel_path: tuple[str, str]
    schema_path: tuple[str, str]
    aliases: tuple[str, ...] = ()
