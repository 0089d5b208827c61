from __future__ import annotations

from subprocess import CalledProcessError

import pytest

from nvoc_setup.config import SetupConfig
from nvoc_setup.core import NvocSetup
from nvoc_setup.utils.colors import Palette
from nvoc_setup.utils.shell import Shell


class FakeShell(Shell):
  """Records commands instead of running them. Commands starting with a prefix in `failing` exit non-zero."""

  def __init__(self):
    super().__init__()
    self.commands: list[str] = []
    self.users: list[tuple[str, str | None]] = []
    self.outputs: dict[str, str] = {}
    self.failing: list[str] = []
    self.binaries: dict[str, str] = {
      "nvidia_oc": "/usr/bin/nvidia_oc",
      "nvidia-smi": "/usr/bin/nvidia-smi",
    }

  def record(self, command: str, user: str | None):
    self.commands.append(command)
    self.users.append((command, user))

  def fails(self, command: str) -> bool:
    return any(command.startswith(prefix) for prefix in self.failing)

  def run(self, command: str, check: bool = True, user: str | None = None):
    self.record(command, user)
    assert not (check and self.fails(command)), f"command failed: {command}"

  def output(self, command: str, check: bool = True, user: str | None = None) -> str:
    self.record(command, user)
    if check and self.fails(command):
      raise CalledProcessError(1, command)
    return next((value for prefix, value in self.outputs.items() if command.startswith(prefix)), "")

  def success(self, command: str, user: str | None = None) -> bool:
    self.record(command, user)
    return not self.fails(command)

  def which(self, name: str) -> str | None:
    return self.binaries.get(name)


class FakeTerminal:
  """Stands in for input(). Raises EOFError once the scripted answers run out."""

  def __init__(self):
    self.answers: list[str | BaseException] = []
    self.prompts: list[str] = []

  def __call__(self, prompt: str = "") -> str:
    self.prompts.append(prompt)
    if not self.answers:
      raise EOFError()
    answer = self.answers.pop(0)
    if isinstance(answer, BaseException):
      raise answer
    return answer


@pytest.fixture
def shell() -> FakeShell:
  return FakeShell()


@pytest.fixture
def terminal(monkeypatch) -> FakeTerminal:
  fake = FakeTerminal()
  monkeypatch.setattr("builtins.input", fake)
  return fake


@pytest.fixture
def config(tmp_path) -> SetupConfig:
  return SetupConfig(
    unit_dir = str(tmp_path / "systemd" / "system"),
    conf_dir = str(tmp_path / "conf.d"),
    file_owner = None,
    settle_delay = 0,
    reexec_with_sudo = False,
    palette = Palette(enabled = False),
  )


@pytest.fixture
def nvoc(config, shell) -> NvocSetup:
  return NvocSetup(config, shell)
