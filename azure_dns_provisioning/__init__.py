"""Azure DNS zone, web app and virtual machine provisioning sample."""

from .handler import main
from .workflow import run_workflow

__version__ = "1.0.0"
__description__ = "Provision and wire together Azure DNS zones, a web app and VMs"

__all__ = ["main", "run_workflow"]
