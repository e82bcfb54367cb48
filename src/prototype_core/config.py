# src/prototype_core/config.py

import logging
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator

from .product import ConfigurableProduct
from .registry import ProductRegistry

logger = logging.getLogger(__name__)


class PrototypeSpec(BaseModel):
    key: str
    name: str
    sku: str
    price: float = Field(ge=0)
    attributes: Dict[str, str] = Field(default_factory=dict)

    @field_validator('key', 'name', 'sku')
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    def to_product(self) -> ConfigurableProduct:
        return ConfigurableProduct(
            name=self.name,
            sku=self.sku,
            price=self.price,
            attributes=self.attributes,
        )


class CatalogConfig(BaseModel):
    prototypes: List[PrototypeSpec]

    @model_validator(mode='after')
    def validate_unique_keys(self):
        """Reject catalogs that declare the same key twice."""
        seen = set()
        for spec in self.prototypes:
            if spec.key in seen:
                raise ValueError(f"Duplicate prototype key '{spec.key}'")
            seen.add(spec.key)
        return self


def load_catalog(filepath: str) -> CatalogConfig:
    """Load and validate a prototype catalog from YAML file."""
    import yaml

    with open(filepath, 'r', encoding='utf-8') as f:
        catalog_dict = yaml.safe_load(f) or {}

    return CatalogConfig.model_validate(catalog_dict)


def build_registry(catalog: CatalogConfig) -> ProductRegistry:
    """Creates a registry preloaded with every prototype in the catalog."""
    registry = ProductRegistry()
    for spec in catalog.prototypes:
        registry.add(spec.key, spec.to_product())
    logger.info(f"Loaded {len(registry)} prototype(s) from catalog")
    return registry
