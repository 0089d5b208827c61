from __future__ import annotations

from inspect import cleandoc

from nvoc_setup.config import SetupConfig


class ServiceTemplate:
  """The nvidia_oc@.service unit. systemd substitutes %i with the GPU index of each instance."""
  config: SetupConfig

  def __init__(self, config: SetupConfig):
    self.config = config

  @property
  def filename(self) -> str:
    return self.config.template_file()

  def content(self) -> str:
    env_file = self.config.conf_file("%i")
    return cleandoc(f'''
      # Managed by nvoc-setup
      [Unit]
      Description=NVIDIA Overclocking Service for GPU %i
      After=network.target

      [Service]
      Type=simple
      User=root
      Restart=always
      RestartSec=60
      # Load config specific to the GPU index
      EnvironmentFile={env_file}

      # Enable persistence mode for this specific GPU
      ExecStartPre={self.config.nvidia_smi_path} -i %i -pm 1

      # Apply settings using the index from the instance name
      ExecStart={self.config.nvidia_oc_path} set \\
          --index %i \\
          --power-limit ${{NV_POWER_LIMIT}} \\
          --freq-offset ${{NV_CORE_OFFSET}} \\
          --mem-offset ${{NV_MEM_OFFSET}}

      [Install]
      WantedBy=multi-user.target
    ''') + "\n"
