# tests/conftest.py
import pytest
from typer.testing import CliRunner


CATALOG_YAML = """
prototypes:
  - key: StandardTShirt
    name: Basic T-Shirt
    sku: TSHIRT-BASE
    price: 15.0
    attributes:
      Material: Cotton
      DefaultColor: White
  - key: sku-1
    name: Mouse
    sku: MOUSE-1
    price: 25.0
"""


@pytest.fixture
def cli_runner():
    """Provide a reusable CLI test runner for Prototype Core."""
    return CliRunner()


@pytest.fixture
def catalog_file(tmp_path):
    """Writes a small two-product catalog and returns its path."""
    path = tmp_path / "catalog.yml"
    path.write_text(CATALOG_YAML)
    return path
