"""Load RoutesConfig from nextroutes.yaml / nextroutes.toml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from nextroutes._errors import ConfigError
from nextroutes.config import RoutesConfig

# Keys accepted from a config file
_KNOWN_KEYS: frozenset[str] = frozenset({
    "pages_dir",
    "non_routable_prefix",
    "output",
    "ignore",
})


def load_config(root: Path, **overrides: object) -> RoutesConfig:
    """Load RoutesConfig from root, optionally merging a config file.

    Looks for nextroutes.yaml, nextroutes.yml, or nextroutes.toml in root.
    If found, loads and merges with overrides. Overrides set to *None* are
    ignored so that unset CLI flags do not mask file values.

    Raises:
        ConfigError: If the config file is malformed, has unknown keys or
            values of the wrong type, or if ``pages_dir`` is not a bare
            directory name.

    """
    file_config = _read_config_file(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    # Normalize output to Path and ignore to a tuple
    if "output" in merged and not isinstance(merged["output"], Path):
        merged["output"] = Path(str(merged["output"]))
    if isinstance(merged.get("ignore"), str):
        merged["ignore"] = (merged["ignore"],)
    elif "ignore" in merged:
        merged["ignore"] = tuple(merged["ignore"])  # type: ignore[arg-type]

    pages_dir = merged.get("pages_dir")
    if isinstance(pages_dir, str) and (
        not pages_dir or "/" in pages_dir or "\\" in pages_dir
    ):
        msg = f"'pages_dir' must be a directory name, not a path: {pages_dir!r}"
        raise ConfigError(msg)
    return RoutesConfig(root=root, **merged)  # type: ignore[arg-type]


def _read_config_file(root: Path) -> dict[str, object]:
    """Read config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("nextroutes.yaml", "nextroutes.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "nextroutes.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Failed to read config file {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_section(data, path)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Failed to read config file {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_section(data, path)


def _flatten_section(data: object, path: Path) -> dict[str, object]:
    """Extract nextroutes.* keys (or bare known keys) into top-level config.

    Keys left empty (``output:``) are treated as unset.
    """
    if not isinstance(data, dict):
        msg = f"Config file {path} must contain a mapping, got {type(data).__name__}"
        raise ConfigError(msg)

    section = data.get("nextroutes", data)
    if not isinstance(section, dict):
        msg = f"Config file {path}: 'nextroutes' must be a mapping"
        raise ConfigError(msg)

    unknown = sorted(set(section) - _KNOWN_KEYS)
    if unknown:
        msg = f"Config file {path}: unknown keys {', '.join(map(str, unknown))}"
        raise ConfigError(msg)

    result: dict[str, object] = {}
    for key, value in section.items():
        if value is None:
            continue
        if key == "ignore":
            valid = isinstance(value, str) or (
                isinstance(value, list) and all(isinstance(v, str) for v in value)
            )
            expected = "a string or a list of strings"
        else:
            valid = isinstance(value, str)
            expected = "a string"
        if not valid:
            msg = (
                f"Config file {path}: '{key}' must be {expected}, "
                f"got {type(value).__name__}"
            )
            raise ConfigError(msg)
        result[key] = value
    return result
