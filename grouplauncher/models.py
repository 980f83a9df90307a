#===============================================================================
#  Group_Launcher | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Shared data models used across the launcher (applications, groups, config).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Application:
    """A single named command started as part of a group."""
    name: str
    command: str                     # executable, or shell command line when use_shell
    args: Tuple[str, ...] = ()
    use_shell: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "command": self.command,
            "args": list(self.args),
            "use_shell": self.use_shell,
        }


@dataclass(frozen=True)
class Group:
    """A named, ordered set of applications launched together."""
    name: str
    apps: Tuple[Application, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "apps": [a.to_dict() for a in self.apps]}


@dataclass(frozen=True)
class Configuration:
    groups: Tuple[Group, ...] = ()
    source: Optional[Path] = field(default=None, compare=False)  # file it was loaded from

    def to_dict(self) -> Dict[str, Any]:
        return {"groups": [g.to_dict() for g in self.groups]}
