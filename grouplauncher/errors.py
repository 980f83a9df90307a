#===============================================================================
#  Group_Launcher | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Exception hierarchy shared by the loader, the terminal UI and the launcher.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Sequence

if TYPE_CHECKING:
    from .launcher import LaunchReport


class LauncherError(Exception):
    """Base class for everything the launcher reports to the user."""


class ConfigError(LauncherError):
    pass


class ConfigNotFoundError(ConfigError):
    """No configuration file exists at any of the searched locations."""

    def __init__(self, searched: Sequence[Path]):
        self.searched: List[Path] = list(searched)
        where = ", ".join(str(p) for p in self.searched) or "(nowhere)"
        super().__init__(f"No configuration file found. Looked in: {where}")


class ConfigParseError(ConfigError):
    """The configuration file exists but is not valid JSON or has the wrong shape."""

    def __init__(self, detail: str, path: Optional[Path] = None):
        self.detail = detail
        self.path = path
        prefix = f"{path}: " if path else ""
        super().__init__(f"{prefix}{detail}")


class TerminalError(LauncherError):
    """The terminal could not be switched into (or out of) full-screen mode."""


class LaunchError(LauncherError):
    """One or more applications of a group failed to spawn."""

    def __init__(self, report: "LaunchReport"):
        self.report = report
        names = ", ".join(f.app_name for f in report.failures)
        super().__init__(
            f"{len(report.failures)} of {report.attempted} application(s) failed to start: {names}"
        )
