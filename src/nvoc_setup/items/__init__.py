from nvoc_setup.items.gpu_info import GpuInfo, parse_gpu_list
from nvoc_setup.items.gpu_profile import GpuProfile, parse_index
from nvoc_setup.items.service_template import ServiceTemplate
