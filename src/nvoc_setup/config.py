from __future__ import annotations

from typing import Sequence

from nvoc_setup.utils.colors import Palette


class SetupConfig:
  """Everything that is fixed for one run: file locations, unit and package names, colors."""
  service_name: str
  unit_dir: str
  conf_dir: str
  package: str
  binary: str
  nvidia_oc_path: str
  nvidia_smi_path: str
  aur_helpers: list[str]
  file_owner: str | None
  settle_delay: float
  reexec_with_sudo: bool
  palette: Palette

  def __init__(
    self,
    service_name: str = "nvidia_oc",
    unit_dir: str = "/etc/systemd/system",
    conf_dir: str = "/etc/conf.d",
    package: str = "nvidia_oc",
    binary: str = "nvidia_oc",
    nvidia_oc_path: str = "/usr/bin/nvidia_oc",
    nvidia_smi_path: str = "/usr/bin/nvidia-smi",
    aur_helpers: Sequence[str] = ("yay", "paru"),
    file_owner: str | None = "root",
    settle_delay: float = 1.0,
    reexec_with_sudo: bool = True,
    palette: Palette | None = None,
  ):
    self.service_name = service_name
    self.unit_dir = unit_dir
    self.conf_dir = conf_dir
    self.package = package
    self.binary = binary
    self.nvidia_oc_path = nvidia_oc_path
    self.nvidia_smi_path = nvidia_smi_path
    self.aur_helpers = list(aur_helpers)
    self.file_owner = file_owner
    self.settle_delay = settle_delay
    self.reexec_with_sudo = reexec_with_sudo
    self.palette = palette or Palette()

  def template_file(self) -> str:
    return f"{self.unit_dir}/{self.service_name}@.service"

  def conf_file(self, index: int | str) -> str:
    return f"{self.conf_dir}/{self.service_name}_{index}"

  def instance(self, index: int) -> str:
    return f"{self.service_name}@{index}.service"
