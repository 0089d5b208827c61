from __future__ import annotations

BLUE = '\033[0;34m'
GREEN = '\033[0;32m'
YELLOW = '\033[1;33m'
RED = '\033[0;31m'
BOLD = '\033[1m'
ENDC = '\033[0m'


class Palette:
  """Color codes handed to everything that prints. A disabled palette renders plain text."""
  enabled: bool
  blue: str
  green: str
  yellow: str
  red: str
  bold: str
  endc: str

  def __init__(self, enabled: bool = True):
    self.enabled = enabled
    self.blue = BLUE if enabled else ""
    self.green = GREEN if enabled else ""
    self.yellow = YELLOW if enabled else ""
    self.red = RED if enabled else ""
    self.bold = BOLD if enabled else ""
    self.endc = ENDC if enabled else ""


def printc(line: str, palette: Palette):
  print(f"{palette.endc}{line}{palette.endc}")
