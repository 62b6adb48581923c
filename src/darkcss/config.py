"""Generator configuration and JSON config loading."""
from __future__ import annotations

import json
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from darkcss import defaults
from darkcss.errors import ConfigError


@dataclass(frozen=True)
class DeviceProfile:
    """The device media queries are evaluated against."""

    type: str = "screen"
    width: str = "1024px"

    def features(self) -> dict[str, str]:
        return {"width": self.width}


@dataclass(frozen=True)
class Source:
    """One upstream origin of stylesheets."""

    url: str
    prefix: str | None = None
    match: tuple[str, ...] = ()
    fetch_options: dict[str, Any] = field(default_factory=dict, hash=False, compare=False)

    @property
    def is_stylesheet(self) -> bool:
        return urlparse(self.url).path.endswith(".css")

    @property
    def headers(self) -> dict[str, str]:
        return dict(self.fetch_options.get("headers") or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Source:
        if "url" not in data:
            raise ConfigError(f"Source has no url: {data!r}")
        match = data.get("match") or []
        if not isinstance(match, (list, tuple)):
            raise ConfigError(f"Source 'match' must be a list of strings: {match!r}")
        return cls(
            url=data["url"],
            prefix=data.get("prefix"),
            match=tuple(str(m) for m in match),
            fetch_options=dict(data.get("fetch_options") or data.get("opts") or {}),
        )


@dataclass(frozen=True)
class GeneratorConfig:
    target_file: str = defaults.TARGET_FILE
    mappings: tuple[tuple[str, str], ...] = tuple(defaults.MAPPINGS)
    sources: tuple[Source, ...] = tuple(Source.from_dict(s) for s in defaults.SOURCES)
    ignore_selectors: tuple[re.Pattern[str], ...] = tuple(defaults.IGNORE_SELECTORS)
    unmergeable_selectors: tuple[re.Pattern[str], ...] = tuple(defaults.UNMERGEABLE_SELECTORS)
    shorthands: tuple[str, ...] = defaults.SHORTHANDS
    device: DeviceProfile = DeviceProfile()
    max_selector_length: int = 76  # -4 for indentation and the trailing " {"
    indent_size: int = 2
    timeout: float = 30.0
    max_workers: int = 8


def _mapping_pairs(raw: Any) -> tuple[tuple[str, str], ...]:
    if isinstance(raw, dict):
        return tuple((str(k), str(v)) for k, v in raw.items())
    if isinstance(raw, list):
        pairs = []
        for item in raw:
            if not isinstance(item, (list, tuple)) or len(item) != 2:
                raise ConfigError(f"Mapping row must be a [key, value] pair: {item!r}")
            pairs.append((str(item[0]), str(item[1])))
        return tuple(pairs)
    raise ConfigError("'mappings' must be an object or a list of pairs")


def _patterns(raw: Any, name: str) -> tuple[re.Pattern[str], ...]:
    if not isinstance(raw, list):
        raise ConfigError(f"'{name}' must be a list of regular expressions")
    try:
        return tuple(re.compile(p) for p in raw)
    except re.error as exc:
        raise ConfigError(f"Invalid pattern in '{name}': {exc}", cause=exc) from exc


def config_from_dict(data: dict[str, Any], base: GeneratorConfig | None = None) -> GeneratorConfig:
    """Overlay the keys present in ``data`` onto ``base`` (or the defaults)."""
    config = base or GeneratorConfig()
    changes: dict[str, Any] = {}

    if "target_file" in data:
        changes["target_file"] = str(data["target_file"])
    if "mappings" in data:
        changes["mappings"] = _mapping_pairs(data["mappings"])
    if "sources" in data:
        if not isinstance(data["sources"], list):
            raise ConfigError("'sources' must be a list")
        changes["sources"] = tuple(Source.from_dict(s) for s in data["sources"])
    for name in ("ignore_selectors", "unmergeable_selectors"):
        if name in data:
            changes[name] = _patterns(data[name], name)
    if "shorthands" in data:
        changes["shorthands"] = tuple(data["shorthands"])
    if "device" in data:
        device = data["device"]
        if not isinstance(device, dict):
            raise ConfigError("'device' must be an object with 'type' and 'width'")
        changes["device"] = DeviceProfile(
            type=device.get("type", "screen"), width=device.get("width", "1024px")
        )
    for name, cast in (
        ("max_selector_length", int),
        ("indent_size", int),
        ("timeout", float),
        ("max_workers", int),
    ):
        if name in data:
            try:
                changes[name] = cast(data[name])
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid value for '{name}': {data[name]!r}", cause=exc) from exc

    return replace(config, **changes)


def load_config(path: str | Path, **overrides: Any) -> GeneratorConfig:
    """Read a JSON config file. Keyword overrides win over file values."""
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}", cause=exc) from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}", cause=exc) from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a JSON object")

    config = config_from_dict(data)
    overrides = {k: v for k, v in overrides.items() if v is not None}
    return replace(config, **overrides) if overrides else config
