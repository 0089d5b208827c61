from __future__ import annotations

import sys
from os import execvp, geteuid
from shutil import which
from typing import Sequence

from nvoc_setup.utils.colors import Palette, printc


def ensure_root(args: Sequence[str], palette: Palette, reexec: bool = True):
  """Returns only when running as root. Otherwise replaces the process with
  `sudo python -m nvoc_setup <args>`, or aborts if re-invoking is disabled or sudo is missing."""
  if geteuid() == 0:
    return
  if not reexec:
    raise SystemExit("Error: this program must be run as root (or through sudo).")
  sudo = which("sudo")
  if sudo is None:
    raise SystemExit("Error: 'sudo' not found. Please run this program as root.")
  printc(f"{palette.yellow}Root privileges required. Requesting sudo...", palette)
  sys.stdout.flush()
  execvp(sudo, [sudo, sys.executable, "-m", "nvoc_setup", *args])
