#===============================================================================
#  Group_Launcher | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Central place for config file naming conventions, terminal theme and texts.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from pathlib import Path

APP_TITLE = "Group Launcher"
APP_DIR_NAME = "launcher"

# --- Config file resolution ---
LOCAL_CONFIG_FILE_NAME = "launcher.json"
USER_CONFIG_FILE_NAME = "config.json"
SYSTEM_CONFIG_PATH = Path("/etc") / APP_DIR_NAME / USER_CONFIG_FILE_NAME
CONFIG_ENV_VAR = "GROUP_LAUNCHER_CONFIG"

LOG_FILE_NAME = "launcher.log"

# --- Exit codes ---
EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_TERMINAL_ERROR = 2
EXIT_LAUNCH_ERROR = 3

# --- Terminal texts ---
PROMPT_TITLE = "What are you going to do today?"
GROUPS_TITLE = " Groups "
APPS_TITLE = " Applications "
EMPTY_GROUPS_TEXT = "No groups configured. Add some to launcher.json."
EMPTY_APPS_TEXT = "(this group launches nothing)"
FOOTER_TEXT = "↑/k: Up  |  ↓/j: Down  |  Enter: Launch  |  q/Esc: Quit"
ITEM_MARKER = "▸"

# --- Terminal theme (prompt_toolkit style classes) ---
TUI_STYLE = {
    "title": "fg:ansicyan bold",
    "frame.border": "fg:ansicyan",
    "frame.label": "fg:ansicyan bold",
    "group": "fg:ansiwhite",
    "group.selected": "fg:ansiblack bg:ansicyan bold",
    "app.name": "fg:ansiwhite bold",
    "app.command": "fg:ansibrightblack",
    "empty": "fg:ansiyellow italic",
    "footer": "fg:ansibrightblack",
}
