# src/prototype_core/registry.py
import logging
import threading
from typing import Dict, List

from .errors import PrototypeNotFoundError
from .product import ProductPrototype

logger = logging.getLogger(__name__)


class ProductRegistry:
    """
    Keyed store of canonical product prototypes.

    The registry keeps its own copy of every prototype and only ever hands
    out clones, so neither the registering caller nor any consumer can
    change the stored state after add().
    """

    def __init__(self):
        self._prototypes: Dict[str, ProductPrototype] = {}
        self._lock = threading.Lock()

    def add(self, key: str, prototype: ProductPrototype):
        """
        Registers `prototype` under `key`, replacing any earlier entry.

        Args:
            key: Lookup identifier (e.g. "StandardTShirt")
            prototype: Template to store; a clone is kept, not the instance itself
        """
        stored = prototype.clone()
        with self._lock:
            replaced = key in self._prototypes
            self._prototypes[key] = stored
        if replaced:
            logger.info(f"Replaced prototype: {key}")
        else:
            logger.info(f"Registered prototype: {key}")

    def get(self, key: str) -> ProductPrototype:
        """
        Returns a fresh clone of the prototype registered under `key`.

        Raises:
            PrototypeNotFoundError: If nothing is registered under `key`
        """
        with self._lock:
            prototype = self._prototypes.get(key)
            if prototype is None:
                raise PrototypeNotFoundError(key)
            return prototype.clone()

    def remove(self, key: str):
        with self._lock:
            if key not in self._prototypes:
                raise PrototypeNotFoundError(key)
            del self._prototypes[key]
        logger.info(f"Removed prototype: {key}")

    def keys(self) -> List[str]:
        with self._lock:
            return sorted(self._prototypes)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._prototypes

    def __len__(self) -> int:
        with self._lock:
            return len(self._prototypes)
