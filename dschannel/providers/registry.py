"""Provider registry and lazy loading for data source channels."""

from __future__ import annotations

import logging
import pkgutil
from functools import lru_cache
from importlib import import_module
from typing import TYPE_CHECKING, cast

from dschannel.providers.exceptions import UnknownPluginError
from dschannel.providers.model import ProviderSpec

if TYPE_CHECKING:
    from dschannel.providers.channels.base import DataSourceChannel
    from dschannel.providers.option_rules import OptionRule

logger = logging.getLogger(__name__)

_PROVIDERS: dict[str, ProviderSpec] = {}
_DISCOVERED = False


def _lookup_key(name: str) -> str:
    return name.strip().lower()


def register_provider(spec: ProviderSpec) -> None:
    """Register a provider specification under its plugin name and aliases."""
    for name in (spec.plugin_name, *spec.aliases):
        _PROVIDERS[_lookup_key(name)] = spec
    logger.debug(f"Registered data source plugin: {spec.plugin_name}")


def _discover_providers() -> None:
    """Discover provider packages and import their registrations."""
    global _DISCOVERED
    if _DISCOVERED:
        return

    if __package__ is None:
        return
    package = import_module(__package__)
    for module_info in pkgutil.iter_modules(package.__path__):
        name = module_info.name
        if not module_info.ispkg:
            continue
        if name in {"channels", "__pycache__"}:
            continue
        import_module(f"{__package__}.{name}.provider")

    _DISCOVERED = True


def _ensure_discovered() -> None:
    _discover_providers()


def get_supported_plugins() -> list[str]:
    """Plugin names of every registered engine (aliases excluded)."""
    _ensure_discovered()
    seen: dict[str, None] = {}
    for spec in _PROVIDERS.values():
        seen.setdefault(spec.plugin_name, None)
    return list(seen)


def get_provider_spec(plugin_name: str) -> ProviderSpec:
    _ensure_discovered()
    spec = _PROVIDERS.get(_lookup_key(plugin_name))
    if spec is None:
        raise UnknownPluginError(plugin_name, get_supported_plugins())
    return spec


def get_option_rule(plugin_name: str) -> OptionRule:
    spec = get_provider_spec(plugin_name)
    module_name, attr_name = spec.schema_path
    module = import_module(module_name)
    rule = getattr(module, attr_name, None)
    if rule is None:
        raise ImportError(f"Option rule '{attr_name}' not found in {module_name}")
    return cast("OptionRule", rule)


def get_channel_class(plugin_name: str) -> type[DataSourceChannel]:
    spec = get_provider_spec(plugin_name)
    module_name, class_name = spec.channel_path
    return _load_channel_class(module_name, class_name)


@lru_cache(maxsize=None)
def _load_channel_class(module_name: str, class_name: str) -> type[DataSourceChannel]:
    module = import_module(module_name)
    channel_class = getattr(module, class_name, None)
    if not isinstance(channel_class, type):
        raise ImportError(f"Channel class '{class_name}' not found in {module_name}")
    return channel_class


@lru_cache(maxsize=None)
def _channel_instance(channel_class: type[DataSourceChannel]) -> DataSourceChannel:
    return channel_class()


def get_channel(plugin_name: str) -> DataSourceChannel:
    """Return the (stateless, shared) channel for a plugin name."""
    return _channel_instance(get_channel_class(plugin_name))

