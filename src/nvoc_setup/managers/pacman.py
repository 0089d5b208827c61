from __future__ import annotations

from os import environ, geteuid
from pwd import getpwuid
from shlex import quote
from typing import Sequence

from nvoc_setup.utils.logging import Logger
from nvoc_setup.utils.shell import Shell


class AurHelper:
  command: str
  user: str | None

  def __init__(self, command: str, user: str | None = None):
    self.command = command
    self.user = user


class PacmanPackageManager:
  """Installs missing AUR packages through yay/paru, running the helper as the account that invoked sudo."""
  shell: Shell
  logger: Logger
  aur_helpers: list[str]

  def __init__(self, shell: Shell, logger: Logger, aur_helpers: Sequence[str] = ("yay", "paru")):
    self.shell = shell
    self.logger = logger
    self.aur_helpers = list(aur_helpers)

  def ensure_installed(self, package: str, binary: str):
    if self.shell.which(binary) is not None:
      return
    self.logger.notice(f"{binary} binary not found.")
    user = self.invoking_user()
    if user == "root":
      raise SystemExit("Error: Cannot install AUR package as pure root.")
    helper = self.find_aur_helper(user)
    self.logger.info(f"Installing '{package}' as user '{user}'...")
    self.install(package, helper)

  def invoking_user(self) -> str:
    return environ.get("SUDO_USER") or environ.get("USER") or getpwuid(geteuid()).pw_name

  def find_aur_helper(self, user: str) -> AurHelper:
    for command in self.aur_helpers:
      if self.shell.which(command) is not None:
        return AurHelper(command, user)
    raise SystemExit(f"Error: No AUR helper found (tried: {', '.join(self.aur_helpers)}).")

  def install(self, package: str, helper: AurHelper):
    self.shell.run(f"{helper.command} -S --noconfirm {quote(package)}", user = helper.user)
