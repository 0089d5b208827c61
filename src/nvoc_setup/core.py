from __future__ import annotations

from time import sleep

from nvoc_setup.config import SetupConfig
from nvoc_setup.items.gpu_profile import GpuProfile, parse_index
from nvoc_setup.items.service_template import ServiceTemplate
from nvoc_setup.managers.file import FileManager
from nvoc_setup.managers.nvidia import NvidiaOcManager, NvidiaSmiManager
from nvoc_setup.managers.pacman import PacmanPackageManager
from nvoc_setup.managers.systemd import SystemdUnitManager
from nvoc_setup.utils.colors import printc
from nvoc_setup.utils.confirm import confirm, prompt_int
from nvoc_setup.utils.error_handling import handle_ctrl_c
from nvoc_setup.utils.logging import Logger
from nvoc_setup.utils.shell import Shell


class NvocSetup:
  config: SetupConfig
  shell: Shell
  logger: Logger
  files: FileManager
  systemd: SystemdUnitManager
  packages: PacmanPackageManager
  nvidia_oc: NvidiaOcManager
  nvidia_smi: NvidiaSmiManager

  def __init__(self, config: SetupConfig, shell: Shell | None = None):
    self.config = config
    self.shell = shell or Shell()
    self.logger = Logger(config.palette)
    self.files = FileManager(owner = config.file_owner)
    self.systemd = SystemdUnitManager(self.shell, self.files)
    self.packages = PacmanPackageManager(self.shell, self.logger, config.aur_helpers)
    self.nvidia_oc = NvidiaOcManager(self.shell, config.binary)
    self.nvidia_smi = NvidiaSmiManager(self.shell)

  @handle_ctrl_c
  def run(
    self,
    index: int | None = None,
    core_offset: int | None = None,
    mem_offset: int | None = None,
    power_limit_watts: int | None = None,
    yes: bool = False,
  ) -> int:
    """Single-shot mode when an index is given, otherwise the interactive menu. Returns the exit status."""
    self.logger.clear()
    self.install_template()
    self.packages.ensure_installed(self.config.package, self.config.binary)

    if index is not None:
      # confirmation is only asked for when the session is interactive anyway
      prompted = None in (core_offset, mem_offset, power_limit_watts)
      self.configure_gpu(index, core_offset, mem_offset, power_limit_watts, interactive = prompted and not yes)
    else:
      self.menu()

    self.logger.print_summary()
    return 0

  def install_template(self):
    template = ServiceTemplate(self.config)
    self.logger.info(f"Updating systemd template unit at {template.filename}...")
    self.systemd.install_template(template)

  def configure_gpu(
    self,
    index: int,
    core_offset: int | None = None,
    mem_offset: int | None = None,
    power_limit_watts: int | None = None,
    interactive: bool = True,
  ) -> bool:
    """Collects the missing values, persists them and restarts the GPU's service instance.
    Returns True if the instance is active afterwards; False if it isn't or the user declined."""
    palette = self.config.palette
    print()
    self.logger.info(f"=== Configuring GPU Index: {index} ===")
    self.print_current_state(index)

    if core_offset is None:
      core_offset = prompt_int("Enter Core Offset (MHz) [Default: 0]: ")
    if mem_offset is None:
      mem_offset = prompt_int("Enter Memory Offset (MHz) [Default: 0]: ")
    if power_limit_watts is None:
      power_limit_watts = prompt_int("Enter Power Limit (Watts) [0 to skip]: ", minimum = 0)

    profile = GpuProfile.from_watts(index, core_offset, mem_offset, power_limit_watts)
    printc(f"{palette.yellow}Settings for GPU {index}:", palette)
    for line in profile.summary():
      print(f"  {line}")

    if interactive and not confirm("Apply and enable service?"):
      return False

    return self.apply(profile)

  def apply(self, profile: GpuProfile) -> bool:
    unit = self.config.instance(profile.index)
    conf_file = self.config.conf_file(profile.index)
    self.logger.info(f"Writing config to {conf_file}...")
    self.files.write(conf_file, profile.env_content(unit), mode = 0o644)

    self.logger.info(f"Enabling {unit}...")
    self.systemd.enable(unit)
    self.systemd.restart(unit)

    sleep(self.config.settle_delay)
    if self.systemd.is_active(unit):
      self.logger.success(f"Success! GPU {profile.index} configured and running.")
      return True
    self.logger.warn(f"Warning: Service failed to start. Check 'systemctl status {self.config.service_name}@{profile.index}'")
    return False

  def print_current_state(self, index: int):
    palette = self.config.palette
    printc(f"{palette.yellow}Current State:", palette)
    state = self.nvidia_oc.query(index)
    if state is None:
      print(f"GPU {index} not accessible via {self.config.binary} yet.")
    else:
      print(state)

    persisted = self.persisted_profile(index)
    if persisted is not None:
      print(f"Persisted settings: {persisted.describe()}")

  def persisted_profile(self, index: int) -> GpuProfile | None:
    conf_file = self.config.conf_file(index)
    try:
      content = self.files.read(conf_file)
      if content is None:
        return None
      return GpuProfile.parse(index, content)
    except ValueError as e:  # also covers UnicodeDecodeError
      self.logger.warn(f"ignoring unreadable config {conf_file}: {e}")
      return None

  def print_gpu_list(self):
    gpus = self.nvidia_smi.list_gpus()
    if gpus is None:
      self.logger.warn("Unable to list GPUs (nvidia-smi missing or failing).")
      return
    print("Available GPUs:")
    if not gpus:
      print("  (none)")
    for gpu in gpus:
      print(f"  {gpu}")

  def menu(self):
    palette = self.config.palette
    while True:
      print()
      self.logger.info("--- NVIDIA Multi-GPU Setup ---")
      self.print_gpu_list()

      try:
        answer = input("Enter GPU Index to configure (or 'q' to quit): ").strip()
      except EOFError:
        print()
        break
      if answer == "q":
        break
      if answer == "":
        continue

      try:
        index = parse_index(answer)
      except ValueError:
        self.logger.warn(f"not a valid GPU index: {answer}")
        continue
      self.configure_gpu(index, interactive = True)

    printc(f"{palette.green}All done.", palette)
