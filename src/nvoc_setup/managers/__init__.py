from nvoc_setup.managers.file import FileManager
from nvoc_setup.managers.nvidia import NvidiaOcManager, NvidiaSmiManager
from nvoc_setup.managers.pacman import AurHelper, PacmanPackageManager
from nvoc_setup.managers.systemd import SystemdUnitManager
