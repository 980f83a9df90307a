#===============================================================================
#  Group_Launcher | logging_setup.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Root logger configuration: a full log file under the user state folder and
#  a rich console handler on stderr for warnings (debug with --verbose).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Mapping, Optional

from rich.console import Console
from rich.logging import RichHandler

from .constants import APP_DIR_NAME, LOG_FILE_NAME

# handlers installed by the last setup_logging call
_installed_handlers: List[logging.Handler] = []


def logs_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    if os.name == "nt":
        base = env.get("LOCALAPPDATA") or str(Path.home() / "AppData" / "Local")
    else:
        base = env.get("XDG_STATE_HOME") or str(Path.home() / ".local" / "state")
    return Path(base) / APP_DIR_NAME / "logs"


def setup_logging(verbose: bool = False, log_dir: Optional[Path] = None) -> Optional[Path]:
    """Configure the root logger. Returns the log file path (None if it could not be created)."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Avoid duplicated output when called more than once
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler in _installed_handlers:
            handler.close()
    _installed_handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        level=logging.DEBUG if verbose else logging.WARNING,
        show_path=False,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    log_file: Optional[Path] = (log_dir or logs_dir()) / LOG_FILE_NAME
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as e:
        root_logger.warning("File logging disabled (%s): %s", log_file, e)
        log_file = None
    else:
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s"))
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    # prompt_toolkit/asyncio chatter is not useful in the launcher log
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    return log_file


@contextmanager
def console_logging_suspended() -> Iterator[None]:
    """Mute console handlers while a full-screen UI owns the terminal."""
    root_logger = logging.getLogger()
    muted = [(h, h.level) for h in root_logger.handlers if isinstance(h, RichHandler)]
    for handler, _ in muted:
        handler.setLevel(logging.CRITICAL + 1)
    try:
        yield
    finally:
        for handler, level in muted:
            handler.setLevel(level)
