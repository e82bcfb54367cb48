# src/prototype_core/product.py

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ProductPrototype(ABC):
    """The contract for every product template that can be cloned."""

    name: str
    price: float

    @property
    @abstractmethod
    def sku(self) -> str:
        pass

    @abstractmethod
    def clone(self) -> "ProductPrototype":
        """
        Returns a new, independently owned copy of this product.
        The copy must not share any mutable state with the source.
        """
        pass

    @abstractmethod
    def display(self) -> str:
        """Returns a human-readable rendering of the product."""
        pass

    @abstractmethod
    def set_attribute(self, key: str, value: str):
        pass

    @abstractmethod
    def set_name(self, name: str):
        pass

    @abstractmethod
    def set_price(self, price: float):
        pass


def _copy_value(value: Any) -> Any:
    # Strings are immutable; anything exposing clone() gets its own copy
    clone = getattr(value, "clone", None)
    if callable(clone):
        return clone()
    return value


class ConfigurableProduct(ProductPrototype):
    """
    A configurable catalog item, e.g. a T-shirt with colour and size.

    The SKU is fixed at construction. Name, price and attributes can be
    changed on any instance without affecting its clones or its source.
    """

    def __init__(
        self,
        name: str,
        sku: str,
        price: float,
        attributes: Optional[Dict[str, str]] = None,
    ):
        self._sku = sku
        self.name = name
        self.price = price
        self._attributes: Dict[str, str] = {}
        for key, value in (attributes or {}).items():
            self._attributes[key] = _copy_value(value)
        logger.debug(f"Creating original product: {name}")

    @property
    def sku(self) -> str:
        return self._sku

    @property
    def attributes(self) -> Dict[str, str]:
        """Returns a copy of the attributes; mutate through set_attribute()."""
        return dict(self._attributes)

    def get_attribute(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._attributes.get(key, default)

    def set_attribute(self, key: str, value: str):
        self._attributes[key] = value

    def set_name(self, name: str):
        self.name = name

    def set_price(self, price: float):
        self.price = price

    def clone(self) -> "ConfigurableProduct":
        logger.debug(f"Cloning product: {self.name}")
        copy = type(self).__new__(type(self))
        copy._sku = self._sku
        copy.name = self.name
        copy.price = self.price
        copy._attributes = {key: _copy_value(value) for key, value in self._attributes.items()}
        return copy

    def display(self) -> str:
        """
        Renders all fields, one per line.

        Attributes follow the scalar fields in insertion order, so the
        output is stable for a given sequence of set_attribute() calls.
        """
        lines = [
            "--- Product ---",
            f"Name: {self.name}",
            f"SKU: {self._sku}",
            f"Price: ${self.price:.2f}",
        ]
        for key, value in self._attributes.items():
            lines.append(f"{key}: {value}")
        lines.append("---------------")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "sku": self._sku,
            "price": self.price,
            "attributes": dict(self._attributes),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigurableProduct):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"ConfigurableProduct(name={self.name!r}, sku={self._sku!r}, price={self.price!r})"
