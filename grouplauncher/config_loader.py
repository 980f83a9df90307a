#===============================================================================
#  Group_Launcher | config_loader.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Locates launcher.json / config.json and parses it into a validated
#  Configuration. Read-only: never creates or rewrites the file.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, List, Mapping, Optional

from .constants import (
    APP_DIR_NAME,
    CONFIG_ENV_VAR,
    LOCAL_CONFIG_FILE_NAME,
    SYSTEM_CONFIG_PATH,
    USER_CONFIG_FILE_NAME,
)
from .errors import ConfigNotFoundError, ConfigParseError
from .models import Application, Configuration, Group

logger = logging.getLogger(__name__)


def user_config_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    if os.name == "nt":
        base = env.get("APPDATA") or str(Path.home() / "AppData" / "Roaming")
        return Path(base) / APP_DIR_NAME
    base = env.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / APP_DIR_NAME


def candidate_paths(
    cwd: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> List[Path]:
    """Return the config locations in the order they are tried.

    Resolution order:
      1) ./launcher.json
      2) $XDG_CONFIG_HOME/launcher/config.json (~/.config when unset, %APPDATA% on Windows)
      3) /etc/launcher/config.json
      Existing files that cannot be read are skipped.
    """
    cwd = Path.cwd() if cwd is None else cwd
    return [
        cwd / LOCAL_CONFIG_FILE_NAME,
        user_config_dir(env) / USER_CONFIG_FILE_NAME,
        SYSTEM_CONFIG_PATH,
    ]


def resolve_config_path(
    explicit: Optional[Path] = None,
    cwd: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Path:
    """Pick the config file to load.

    An explicit path (argument or GROUP_LAUNCHER_CONFIG) disables the search.
    """
    env = os.environ if env is None else env
    if explicit is None and env.get(CONFIG_ENV_VAR):
        explicit = Path(env[CONFIG_ENV_VAR])

    if explicit is not None:
        explicit = explicit.expanduser()
        if explicit.is_file():
            return explicit
        raise ConfigNotFoundError([explicit])

    searched = candidate_paths(cwd, env)
    for p in searched:
        if not p.is_file():
            logger.debug("No config at %s", p)
            continue
        if not os.access(p, os.R_OK):
            logger.debug("Skipping unreadable config %s", p)
            continue
        logger.debug("Using config file %s", p)
        return p
    raise ConfigNotFoundError(searched)


# ----------------------------
# Schema validation
# ----------------------------
def _expect(value: Any, kind: type, where: str, what: str) -> Any:
    # bool is an int subclass; keep the two apart
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise ConfigParseError(f"{where}: expected {what}, got {type(value).__name__}")
    return value


def _parse_app(raw: Any, where: str) -> Application:
    _expect(raw, dict, where, "an object")
    for required in ("name", "command"):
        if required not in raw:
            raise ConfigParseError(f"{where}: missing required field '{required}'")

    name = _expect(raw["name"], str, f"{where}.name", "a string")
    command = _expect(raw["command"], str, f"{where}.command", "a string")
    if not command.strip():
        raise ConfigParseError(f"{where}.command: must not be empty")

    args = _expect(raw.get("args", []), list, f"{where}.args", "an array of strings")
    for i, a in enumerate(args):
        _expect(a, str, f"{where}.args[{i}]", "a string")

    use_shell = _expect(raw.get("use_shell", False), bool, f"{where}.use_shell", "a boolean")
    return Application(name=name, command=command, args=tuple(args), use_shell=use_shell)


def _parse_group(raw: Any, where: str) -> Group:
    _expect(raw, dict, where, "an object")
    if "name" not in raw:
        raise ConfigParseError(f"{where}: missing required field 'name'")
    name = _expect(raw["name"], str, f"{where}.name", "a string")
    apps = _expect(raw.get("apps", []), list, f"{where}.apps", "an array")
    return Group(
        name=name,
        apps=tuple(_parse_app(a, f"{where}.apps[{i}]") for i, a in enumerate(apps)),
    )


def parse_config(text: str, source: Optional[Path] = None) -> Configuration:
    """Parse JSON text into a Configuration. Unknown keys are ignored."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"invalid JSON: {e}", source) from e

    try:
        _expect(data, dict, "<root>", "an object")
        if "groups" not in data:
            raise ConfigParseError("<root>: missing required field 'groups'")
        groups = _expect(data["groups"], list, "groups", "an array")
        parsed = tuple(_parse_group(g, f"groups[{i}]") for i, g in enumerate(groups))
    except ConfigParseError as e:
        if source is not None and e.path is None:
            raise ConfigParseError(e.detail, source) from None
        raise

    return Configuration(groups=parsed, source=source)


def load_config(
    path: Optional[Path] = None,
    cwd: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Configuration:
    """Resolve and load the configuration file."""
    config_path = resolve_config_path(path, cwd, env)
    try:
        text = config_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"file is not valid UTF-8: {e}", config_path) from e
    except OSError as e:
        raise ConfigParseError(f"cannot read file: {e}", config_path) from e

    config = parse_config(text, source=config_path)
    logger.info(
        "Loaded %d group(s) from %s", len(config.groups), config_path
    )
    return config


def dump_config(config: Configuration) -> str:
    """Serialize a Configuration back to the on-disk JSON shape."""
    return json.dumps(config.to_dict(), indent=2, ensure_ascii=False)


def example_config() -> Configuration:
    """Sample configuration mirroring the classic hard-wired menu."""
    def app(name: str, command: str, *args: str, use_shell: bool = False) -> Application:
        return Application(name=name, command=command, args=tuple(args), use_shell=use_shell)

    return Configuration(groups=(
        Group("Nothing"),
        Group("Study", (app("Obsidian", "obsidian"), app("Browser", "brave-browser"))),
        Group("Docker", (
            app("Containers", "docker start $(docker ps -aq)", use_shell=True),
            app("Terminal", "konsole"),
            app("Obsidian", "obsidian"),
        )),
        Group("Dev", (app("Editor", "code"), app("Obsidian", "obsidian"))),
        Group("Play", (app("Discord", "discord"), app("Steam", "steam"))),
    ))

