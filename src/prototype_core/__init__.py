"""
Prototype Core: a keyed registry of product templates.

Provides:
- ConfigurableProduct: a cloneable product template
- ProductRegistry: stores prototypes and hands out independent clones
- load_catalog / build_registry: preload a registry from a YAML catalog
"""

from .errors import PrototypeNotFoundError
from .product import ConfigurableProduct, ProductPrototype
from .registry import ProductRegistry

__version__ = "0.1.0"

__all__ = [
    "ConfigurableProduct",
    "ProductPrototype",
    "ProductRegistry",
    "PrototypeNotFoundError",
    "__version__",
]
