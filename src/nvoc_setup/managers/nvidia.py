from __future__ import annotations

from subprocess import CalledProcessError

from nvoc_setup.items.gpu_info import GpuInfo, parse_gpu_list
from nvoc_setup.utils.shell import Shell


class NvidiaOcManager:
  shell: Shell
  binary: str

  def __init__(self, shell: Shell, binary: str = "nvidia_oc"):
    self.shell = shell
    self.binary = binary

  def available(self) -> bool:
    return self.shell.which(self.binary) is not None

  def query(self, index: int) -> str | None:
    """Current clocks and limits as printed by `nvidia_oc get`; None if the tool is missing or the query fails."""
    if not self.available():
      return None
    try:
      return self.shell.output(f"{self.binary} get --index {index}")
    except CalledProcessError:
      return None


class NvidiaSmiManager:
  shell: Shell
  binary: str

  def __init__(self, shell: Shell, binary: str = "nvidia-smi"):
    self.shell = shell
    self.binary = binary

  def list_gpus(self) -> list[GpuInfo] | None:
    if self.shell.which(self.binary) is None:
      return None
    try:
      output = self.shell.output(f"{self.binary} --query-gpu=index,name,power.draw,power.limit --format=csv,noheader")
    except CalledProcessError:
      return None
    return parse_gpu_list(output)
