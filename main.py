#===============================================================================
#  Group_Launcher  |  Terminal Application Group Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  A terminal launcher that reads named groups of applications from a JSON
#  file, lets the user pick one group with the keyboard and starts every
#  application of that group as a detached process.
#
#  Config Conventions
#  ------------------
#    ./launcher.json                          -> project-local groups
#    $XDG_CONFIG_HOME/launcher/config.json    -> per-user groups
#    /etc/launcher/config.json                -> system-wide groups
#    (first file found wins; --config PATH skips the search)
#
#  Keys
#  ----
#    Up / k, Down / j   move the highlight (wraps around)
#    Enter              launch the highlighted group
#    q / Esc            quit without launching
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (prompt_toolkit, rich) which are
#  licensed separately by their respective authors. Ensure compliance with
#  their license terms when distributing this software.
#===============================================================================

from grouplauncher.cli import main


if __name__ == "__main__":
    main()
