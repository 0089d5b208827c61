from __future__ import annotations

import shutil
from inspect import cleandoc
from os import environ
from pwd import getpwnam
from subprocess import CalledProcessError, Popen, run


class Shell:
  """Runs shell commands on behalf of the managers. Tests swap in a recording fake."""
  verbose: bool
  executable: str

  def __init__(self, verbose: bool = False, executable: str = "/bin/sh"):
    self.verbose = verbose
    self.executable = executable

  def run(self, command: str, check: bool = True, user: str | None = None):
    self.echo(command, user)
    with Popen(
      command,
      shell = True,
      executable = self.executable,
      user = user,
      env = env_for_user(user) if user else None,
    ) as process:
      exitcode = process.wait()
    assert exitcode == 0 or not check, f"command failed: {command}"

  def output(self, command: str, check: bool = True, user: str | None = None) -> str:
    self.echo(command, user)
    return run(
      command,
      executable = self.executable,
      check = check,
      shell = True,
      capture_output = True,
      universal_newlines = True,
      user = user,
      env = env_for_user(user) if user else None,
    ).stdout.strip()

  def success(self, command: str, user: str | None = None) -> bool:
    try:
      self.output(command, check = True, user = user)
      return True
    except CalledProcessError:
      return False

  def which(self, name: str) -> str | None:
    return shutil.which(name)

  def echo(self, command: str, user: str | None):
    if not self.verbose:
      return
    lines = cleandoc(command).split("\n")
    for idx, line in enumerate(lines):
      prefix = "$" if idx == 0 else " "
      print(f"{prefix} {line}")
    if user is not None:
      print(f"  (run as {user})")


def env_for_user(user: str) -> dict[str, str]:
  result = {**environ, "USER": user}
  try:
    result["HOME"] = getpwnam(user).pw_dir
  except KeyError:
    pass  # unknown accounts keep the current HOME
  return result
