"""Internationalization helpers for messenger diagnostics.

This module loads the library's own log and console messages from
locale-specific YAML files and renders them with safe ``{name}`` placeholder
substitution. Plugin message templates are handled by
:mod:`messenger.store`, not here.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from logging import Logger
from string import Template
from typing import Any, Dict, Mapping

import yaml

DEFAULT_LOCALE = "en"
_LOCALES_PACKAGE = "messenger.locales"


class _SafeDict(dict):
    """Dictionary that leaves unknown format keys untouched."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def _normalize_locale(locale: str | None) -> str:
    normalized = (locale or DEFAULT_LOCALE).strip().replace("_", "-").lower()
    return normalized or DEFAULT_LOCALE


def _candidate_locales(locale: str) -> list[str]:
    normalized = _normalize_locale(locale)
    language = normalized.split("-")[0]

    candidates = [normalized]
    if language not in candidates:
        candidates.append(language)
    if DEFAULT_LOCALE not in candidates:
        candidates.append(DEFAULT_LOCALE)
    return candidates


def _flatten_messages(node: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    flat: Dict[str, str] = {}
    for key, value in node.items():
        full_key = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping):
            flat.update(_flatten_messages(value, prefix=full_key))
        else:
            flat[full_key] = str(value)
    return flat


@lru_cache(maxsize=None)
def _load_catalog(locale: str) -> Dict[str, str]:
    """Load and flatten the locale catalog."""
    try:
        base = resources.files(_LOCALES_PACKAGE)
    except ModuleNotFoundError:
        return {}

    path = base.joinpath(locale, "messages.yaml")
    if not path.is_file():
        return {}

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError:
        return {}
    if not isinstance(data, Mapping):
        return {}
    return _flatten_messages(data)


def _format_template(template: str, params: Mapping[str, Any]) -> str:
    try:
        return template.format_map(_SafeDict(params))
    except (ValueError, IndexError, AttributeError):
        return Template(template).safe_substitute(**params)


def get_message(
    key: str,
    /,
    *,
    locale: str = DEFAULT_LOCALE,
    params: Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> str:
    """Retrieve a localized diagnostic message by key.

    Unknown keys are returned unchanged; unknown placeholders are left in
    the text.
    """

    merged_params: Dict[str, Any] = {}
    if params:
        merged_params.update(params)
    merged_params.update(kwargs)

    template: str | None = None
    for candidate in _candidate_locales(locale):
        catalog = _load_catalog(candidate)
        if key in catalog:
            template = catalog[key]
            break

    if template is None:
        template = key

    return _format_template(template, merged_params)


def log_warning(
    logger: Logger,
    key: str,
    /,
    *,
    locale: str = DEFAULT_LOCALE,
    params: Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> None:
    """Log a localized warning message."""

    message = get_message(key, locale=locale, params=params, **kwargs)
    logger.warning(message)


__all__ = ["DEFAULT_LOCALE", "get_message", "log_warning"]
