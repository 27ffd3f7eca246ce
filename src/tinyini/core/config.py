from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from tinyini.core.models import CheckConfig, UIConfig

# Python 3.11+ has tomllib; for 3.9/3.10 use tomli
try:
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore


REPO_CONFIG_FILE = ".tinyini.toml"

DEFAULT_GLOBAL_CONFIG_FILES = (
    "~/.config/tinyini/config.toml",
    "~/.tinyini.toml",
)


def _read_toml(path: Path) -> Dict[str, Any]:
    data = tomllib.loads(path.read_text(encoding="utf-8", errors="replace"))
    if not isinstance(data, dict):
        return {}
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge override into base (dict-only). Lists/scalars are replaced.
    """
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)  # type: ignore[arg-type]
        else:
            out[k] = v
    return out


def _table(merged: Dict[str, Any], name: str) -> Dict[str, Any]:
    t = merged.get(name) or {}
    return t if isinstance(t, dict) else {}


def find_repo_config(start_dir: Path) -> Optional[Path]:
    """
    Closest .tinyini.toml in start_dir or any of its parents.
    """
    cur = start_dir.resolve()
    for parent in [cur, *cur.parents]:
        p = parent / REPO_CONFIG_FILE
        if p.is_file():
            return p
    return None


def find_global_config() -> Optional[Path]:
    for raw in DEFAULT_GLOBAL_CONFIG_FILES:
        p = Path(raw).expanduser().resolve()
        if p.is_file():
            return p
    return None


@dataclass(frozen=True)
class LoadedConfig:
    config: CheckConfig
    ui_config: UIConfig
    global_path: Optional[Path]
    repo_path: Optional[Path]


def load_config(
    start_dir: Path,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> LoadedConfig:
    """
    Precedence (lowest -> highest):
      defaults (CheckConfig/UIConfig) ->
      global config ->
      repo config (closest) ->
      cli_overrides

    Raises pydantic.ValidationError for values the models reject.
    """
    cli_overrides = cli_overrides or {}

    global_path = find_global_config()
    repo_path = find_repo_config(start_dir)

    merged: Dict[str, Any] = {}
    if global_path:
        merged = _deep_merge(merged, _read_toml(global_path))
    if repo_path:
        merged = _deep_merge(merged, _read_toml(repo_path))
    # CLI overrides use the same [check]/[ui] shape as the files
    merged = _deep_merge(merged, cli_overrides)

    return LoadedConfig(
        config=CheckConfig.model_validate(_table(merged, "check")),
        ui_config=UIConfig.model_validate(_table(merged, "ui")),
        global_path=global_path,
        repo_path=repo_path,
    )
