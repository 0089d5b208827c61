from __future__ import annotations

from nvoc_setup.items.service_template import ServiceTemplate
from nvoc_setup.managers.file import FileManager
from nvoc_setup.utils.shell import Shell


class SystemdUnitManager:
  shell: Shell
  files: FileManager

  def __init__(self, shell: Shell, files: FileManager):
    self.shell = shell
    self.files = files

  def install_template(self, template: ServiceTemplate):
    """Overwrites the unit file unconditionally, so every run ends up with identical content."""
    self.files.write(template.filename, template.content(), mode = 0o644)
    self.daemon_reload()

  def daemon_reload(self):
    self.shell.run("systemctl daemon-reload")

  def enable(self, unit: str):
    self.shell.run(f"systemctl enable {unit}")

  def restart(self, unit: str):
    self.shell.run(f"systemctl restart {unit}")

  def is_active(self, unit: str) -> bool:
    return self.shell.success(f"systemctl is-active --quiet {unit}")
