from .loader import load_rules
from .models import OpenGraphRules

__all__ = ["OpenGraphRules", "load_rules"]
