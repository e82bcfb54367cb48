# src/prototype_core/cli.py
import typer
import yaml
from pathlib import Path
from typing import Dict, List, Optional
from pydantic import ValidationError
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import load_catalog, build_registry
from .errors import PrototypeNotFoundError
from .logging_utils import PrototypeLogger, console
from .product import ConfigurableProduct, ProductPrototype
from .registry import ProductRegistry

app = typer.Typer(help="Prototype Core CLI")


def version_callback(value: bool):
    if value:
        from prototype_core import __version__
        console.print(f"Prototype Core version: {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
):
    """Prototype Core - clone products from a registry of templates."""
    pass


def _load_registry(catalog_file: Path) -> ProductRegistry:
    try:
        return build_registry(load_catalog(str(catalog_file)))
    except FileNotFoundError:
        console.print(f"[red]✗ Catalog not found: {escape(str(catalog_file))}[/red]")
        raise typer.Exit(code=1)
    except OSError as e:
        console.print(f"[red]✗ Cannot read catalog: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    except (ValidationError, yaml.YAMLError, UnicodeDecodeError) as e:
        console.print(f"[red]✗ Invalid catalog: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def _get_clone(registry: ProductRegistry, key: str) -> ProductPrototype:
    try:
        return registry.get(key)
    except PrototypeNotFoundError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        console.print("Run `prototype list <catalog>` to see available prototypes")
        raise typer.Exit(code=1)


def _parse_attributes(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Parses repeated KEY=VALUE options into a dict (later pairs win)."""
    parsed: Dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            console.print(f"[red]✗ Invalid attribute '{escape(pair)}', expected KEY=VALUE[/red]")
            raise typer.Exit(code=1)
        parsed[key.strip()] = value
    return parsed


# ======================================================================================
# COMMAND: prototype list
# ======================================================================================
@app.command("list")
def list_prototypes(
    catalog_file: Path = typer.Argument("catalog.yml", help="Path to catalog.yml"),
):
    """List all prototypes registered from a catalog."""
    registry = _load_registry(catalog_file)

    console.print("[bold]REGISTERED PROTOTYPES[/bold]")
    table = Table(show_header=True, header_style="bold")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("SKU", style="white")
    table.add_column("Price", justify="right")
    for key in registry.keys():
        product = registry.get(key)
        table.add_row(key, product.name, product.sku, f"{product.price:.2f}")
    console.print(table)
    console.print(f"\n{len(registry)} prototype(s)")


# ======================================================================================
# COMMAND: prototype show
# ======================================================================================
@app.command()
def show(
    catalog_file: Path = typer.Argument(..., help="Path to catalog.yml"),
    key: str = typer.Argument(..., help="Prototype key to display"),
):
    """Display a fresh clone of one prototype."""
    registry = _load_registry(catalog_file)
    product = _get_clone(registry, key)
    PrototypeLogger("show").product(product.display(), title=f"PROTOTYPE: {key}")


# ======================================================================================
# COMMAND: prototype clone
# ======================================================================================
@app.command()
def clone(
    catalog_file: Path = typer.Argument(..., help="Path to catalog.yml"),
    key: str = typer.Argument(..., help="Prototype key to clone"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Name for the new product"),
    price: Optional[float] = typer.Option(None, "--price", "-p", help="Price for the new product"),
    attrs: Optional[List[str]] = typer.Option(None, "--attr", "-a", help="Attribute as KEY=VALUE (repeatable)"),
):
    """Clone a prototype, customize the copy and show both."""
    logger = PrototypeLogger("clone")
    registry = _load_registry(catalog_file)
    overrides = _parse_attributes(attrs)

    product = _get_clone(registry, key)
    if name is not None:
        product.set_name(name)
    if price is not None:
        product.set_price(price)
    for attr_key, attr_value in overrides.items():
        product.set_attribute(attr_key, attr_value)

    logger.success(f"Cloned '{key}'")
    logger.product(product.display(), title="NEW PRODUCT")
    logger.product(registry.get(key).display(), title="PROTOTYPE (unchanged)")


# ======================================================================================
# COMMAND: prototype demo
# ======================================================================================
@app.command()
def demo():
    """Run the T-shirt walkthrough: two variants cloned from one base."""
    logger = PrototypeLogger("demo")

    base = ConfigurableProduct("Basic T-Shirt", "TSHIRT-BASE", 15.00)
    base.set_attribute("Material", "Cotton")
    base.set_attribute("DefaultColor", "White")

    registry = ProductRegistry()
    registry.add("StandardTShirt", base)
    logger.info("Registered 'StandardTShirt'", prefix="REGISTRY")

    for color, variant_price in (("Red", 16.50), ("Blue", 16.00)):
        variant = registry.get("StandardTShirt")
        variant.set_name(f"{color} Cotton T-Shirt")
        variant.set_attribute("Color", color)
        variant.set_attribute("DefaultColor", color)
        variant.set_price(variant_price)
        logger.product(variant.display())

    logger.product(base.display(), title="Original base T-Shirt (should be unchanged):")
    if registry.get("StandardTShirt") == base:
        console.print(Panel("[green bold][OK] Prototype unchanged by clones[/green bold]", border_style="green"))
    else:
        logger.error("Prototype was modified by a clone")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
