# tests/test_config.py
import pytest
from pydantic import ValidationError
from prototype_core.config import load_catalog, build_registry, CatalogConfig, PrototypeSpec
from prototype_core.errors import PrototypeNotFoundError


def test_load_valid_catalog(catalog_file):
    """Test that a valid catalog.yml is parsed correctly"""
    catalog = load_catalog(catalog_file)

    assert isinstance(catalog, CatalogConfig)
    assert len(catalog.prototypes) == 2
    assert catalog.prototypes[0].key == "StandardTShirt"
    assert catalog.prototypes[0].attributes == {"Material": "Cotton", "DefaultColor": "White"}
    assert catalog.prototypes[1].attributes == {}


def test_build_registry_from_catalog(catalog_file):
    registry = build_registry(load_catalog(catalog_file))

    assert registry.keys() == ["StandardTShirt", "sku-1"]
    tshirt = registry.get("StandardTShirt")
    assert tshirt.name == "Basic T-Shirt"
    assert tshirt.sku == "TSHIRT-BASE"
    assert tshirt.get_attribute("Material") == "Cotton"
    with pytest.raises(PrototypeNotFoundError):
        registry.get("missing")


def test_missing_field_raises_error(tmp_path):
    """Test that a prototype without 'sku' raises a ValidationError"""
    config_file = tmp_path / "catalog.yml"
    config_file.write_text("""
prototypes:
  - key: broken
    name: Broken
    price: 1.0
""")
    with pytest.raises(ValidationError):
        load_catalog(config_file)


def test_negative_price_rejected():
    with pytest.raises(ValidationError):
        PrototypeSpec(key="k", name="n", sku="s", price=-1.0)


def test_blank_key_rejected():
    with pytest.raises(ValidationError):
        PrototypeSpec(key="  ", name="n", sku="s", price=1.0)


def test_duplicate_keys_rejected(tmp_path):
    config_file = tmp_path / "catalog.yml"
    config_file.write_text("""
prototypes:
  - {key: dup, name: A, sku: A-1, price: 1.0}
  - {key: dup, name: B, sku: B-1, price: 2.0}
""")
    with pytest.raises(ValidationError, match="Duplicate prototype key"):
        load_catalog(config_file)


def test_empty_file_raises_error(tmp_path):
    config_file = tmp_path / "catalog.yml"
    config_file.write_text("")
    with pytest.raises(ValidationError):
        load_catalog(config_file)


def test_missing_file_raises_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "nope.yml")


def test_list_shaped_catalog_raises_validation_error(tmp_path):
    """Test that a top-level YAML list is reported by pydantic, not as a TypeError"""
    config_file = tmp_path / "catalog.yml"
    config_file.write_text("- key: a\n  name: A\n  sku: S\n  price: 1\n")
    with pytest.raises(ValidationError):
        load_catalog(config_file)


def test_scalar_catalog_raises_validation_error(tmp_path):
    config_file = tmp_path / "catalog.yml"
    config_file.write_text("just a string\n")
    with pytest.raises(ValidationError):
        load_catalog(config_file)
