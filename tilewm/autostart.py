"""Running the user's autostart scripts at startup."""

from __future__ import annotations

import os
import shlex
import subprocess
from typing import Mapping, Optional

DWM_DIR = "dwm"
LOCAL_SHARE = ".local/share"
AUTOSTART_BLOCKING = "autostart_blocking.sh"
AUTOSTART = "autostart.sh"


def autostart_dir(env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Directory holding the autostart scripts, or None without $HOME.

    Uses $XDG_DATA_HOME/dwm when set, else ~/.local/share/dwm; if that is
    not a directory, falls back to ~/.dwm.
    """
    env = os.environ if env is None else env
    home = env.get("HOME")
    if home is None:
        return None
    xdg = env.get("XDG_DATA_HOME")
    if xdg:
        path = f"{xdg}/{DWM_DIR}"
    else:
        path = f"{home}/{LOCAL_SHARE}/{DWM_DIR}"
    if not os.path.isdir(path):
        path = f"{home}/.{DWM_DIR}"
    return path


def run_autostart(env: Optional[Mapping[str, str]] = None) -> list:
    """Run the blocking script and wait, then start the other in the background.

    Only executable scripts are run. Returns the paths that were started.
    """
    directory = autostart_dir(env)
    if directory is None:
        return []
    started = []
    blocking = f"{directory}/{AUTOSTART_BLOCKING}"
    if os.access(blocking, os.X_OK):
        subprocess.run(shlex.quote(blocking), shell=True, check=False)
        started.append(blocking)
    background = f"{directory}/{AUTOSTART}"
    if os.access(background, os.X_OK):
        subprocess.Popen(shlex.quote(background), shell=True, start_new_session=True)
        started.append(background)
    return started