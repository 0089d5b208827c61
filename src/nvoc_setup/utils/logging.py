from __future__ import annotations

from typing import Literal

from nvoc_setup.utils.colors import Palette, printc


class LogMessage:
  text: str
  level: Literal["warn", "error"]

  def __init__(self, level: Literal["warn", "error"], text: str):
    self.level = level
    self.text = text


class Logger:
  """Prints progress lines and keeps warnings/errors for the summary at the end of a run."""
  palette: Palette
  messages: list[LogMessage]

  def __init__(self, palette: Palette):
    self.palette = palette
    self.messages = []

  def clear(self):
    self.messages = []

  def info(self, message: str):
    printc(f"{self.palette.blue}{message}", self.palette)

  def notice(self, message: str):
    printc(f"{self.palette.yellow}{message}", self.palette)

  def success(self, message: str):
    printc(f"{self.palette.green}{message}", self.palette)

  def warn(self, message: str):
    self.messages.append(LogMessage("warn", message))
    printc(f"{self.palette.yellow}{message}", self.palette)

  def error(self, message: str):
    self.messages.append(LogMessage("error", message))
    printc(f"{self.palette.red}{message}", self.palette)

  def print_summary(self):
    if not self.messages:
      return
    print()
    printc(f"{self.palette.bold}Messages logged during setup:", self.palette)
    for message in dict.fromkeys(message.text for message in self.messages):
      printc(f"- {message}", self.palette)
