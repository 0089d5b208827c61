from nvoc_setup.config import SetupConfig
from nvoc_setup.core import NvocSetup
from nvoc_setup.items import GpuInfo, GpuProfile, ServiceTemplate
from nvoc_setup.managers import AurHelper, FileManager, NvidiaOcManager, NvidiaSmiManager, PacmanPackageManager, SystemdUnitManager
from nvoc_setup.utils.colors import Palette
from nvoc_setup.utils.shell import Shell
