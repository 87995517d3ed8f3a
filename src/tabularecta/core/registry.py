from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from .errors import MissingKeyError, UnexpectedKeyError, UnknownCipherError
from .results import CipherResult

logger = logging.getLogger(__name__)


class CipherPlugin(Protocol):
    name: str
    # keys that must be supplied / keys that have a default
    required_keys: tuple[str, ...]
    optional_keys: tuple[str, ...]

    def encrypt(self, text: str, **keys: Any) -> CipherResult:
        ...

    def decrypt(self, text: str, **keys: Any) -> CipherResult:
        ...


_PLUGINS: dict[str, CipherPlugin] = {}


def register_plugin(plugin: CipherPlugin) -> None:
    key = plugin.name.lower().strip()
    if not key:
        raise ValueError("Plugin must have a non-empty name.")
    _PLUGINS[key] = plugin
    logger.debug("registered cipher plugin %s", key)


def list_plugins() -> list[str]:
    return sorted(_PLUGINS.keys())


def get_plugin(cipher_name: str) -> CipherPlugin:
    name = (cipher_name or "").lower().strip()
    if name not in _PLUGINS:
        raise UnknownCipherError(f"Unknown cipher '{cipher_name}'. Available: {', '.join(list_plugins())}")
    return _PLUGINS[name]


def _check_keys(plugin: CipherPlugin, keys: dict[str, Any]) -> dict[str, Any]:
    """
    Drop keys left as None (unset CLI options), then make sure what remains
    is exactly what the plugin accepts.
    """
    given = {k: v for k, v in keys.items() if v is not None}
    accepted = set(plugin.required_keys) | set(plugin.optional_keys)

    unexpected = sorted(set(given) - accepted)
    if unexpected:
        raise UnexpectedKeyError(
            f"Cipher '{plugin.name}' does not take {', '.join(unexpected)}. "
            f"Accepted keys: {', '.join(plugin.required_keys + plugin.optional_keys) or 'none'}."
        )

    missing = [k for k in plugin.required_keys if k not in given]
    if missing:
        raise MissingKeyError(f"Cipher '{plugin.name}' requires {', '.join('--' + k for k in missing)}.")
    return given


def encrypt_known(cipher_name: str, text: str, **keys: Optional[Any]) -> CipherResult:
    plugin = get_plugin(cipher_name)
    given = _check_keys(plugin, keys)
    logger.debug("encrypt with %s keys=%s", plugin.name, sorted(given))
    return plugin.encrypt(text, **given)


def decrypt_known(cipher_name: str, text: str, **keys: Optional[Any]) -> CipherResult:
    plugin = get_plugin(cipher_name)
    given = _check_keys(plugin, keys)
    logger.debug("decrypt with %s keys=%s", plugin.name, sorted(given))
    return plugin.decrypt(text, **given)
