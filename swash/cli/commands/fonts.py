"""Fonts command - font lookup utilities."""

from __future__ import annotations

import click
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from swash.backends.base import FontBackend, StaticAccessibility
from swash.backends.pillow import PillowFontBackend
from swash.boilerplate import generate_boilerplate
from swash.config import Config
from swash.exceptions import FontNotFoundError
from swash.fonts.factory import FailurePolicy, FontFactory
from swash.fonts.variant import FontVariant, validate_font_name

console = Console()


def make_backend(config: Config) -> FontBackend:
    """Create the font backend described by ``config``."""
    return PillowFontBackend(extra_dirs=config.font_dirs)


def _config(ctx: click.Context) -> Config:
    return ctx.obj.get("config") or Config()


@click.group()
def fonts() -> None:
    """Font lookup commands."""
    pass


@fonts.command("list")
@click.option("--family", help="Filter by font family name")
@click.pass_context
def list_fonts(ctx: click.Context, family: str | None) -> None:
    """List available fonts by family."""
    backend = make_backend(_config(ctx))

    with console.status("[bold green]Loading fonts..."):
        available = backend.available_fonts()

    table = Table(title="Available Fonts")
    table.add_column("Family", style="cyan")
    table.add_column("Font name", style="green")

    count = 0
    for family_name, names in available.items():
        if family and family.lower() not in family_name.lower():
            continue
        for name in names:
            table.add_row(family_name, name)
            count += 1

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {count} fonts")


@fonts.command("find")
@click.argument("name")
@click.option("--size", "point_size", type=float, default=17.0, show_default=True, help="Point size")
@click.option("--strict/--lenient", default=None, help="Override the failure policy")
@click.pass_context
def find_font(
    ctx: click.Context,
    name: str,
    point_size: float,
    strict: bool | None,
) -> None:
    """Construct a font by name and report the result.

    NAME is looked up as given; no bold text mapping applies to it.
    """
    config = _config(ctx)
    strict = config.strict if strict is None else strict
    try:
        validate_font_name(name)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(2) from e
    variant_type = FontVariant("Requested", [("REQUESTED", name)])
    factory = FontFactory(
        make_backend(config),
        StaticAccessibility(content_size_category=config.content_size_category),
        platform=config.platform,
        policy=FailurePolicy.STRICT if strict else FailurePolicy.FALLBACK,
    )

    with console.status(f"[bold green]Searching for '{name}'..."):
        try:
            font = factory.of_size(variant_type.REQUESTED, point_size)
        except FontNotFoundError as e:
            console.print(f"[red]Not found:[/red] {e}")
            raise SystemExit(1) from e
        except ValueError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise SystemExit(2) from e

    if font.is_fallback:
        console.print(f"[yellow]Not found:[/yellow] {name} (using the system font)")
        return
    console.print(f"[green]Found:[/green] {font.name}")
    console.print(f"[dim]Size:[/dim] {font.size:g}")


@fonts.command("boilerplate")
@click.option("--family", help="Only generate families matching this name")
@click.pass_context
def boilerplate(ctx: click.Context, family: str | None) -> None:
    """Print FontVariant declarations for installed fonts."""
    backend = make_backend(_config(ctx))

    with console.status("[bold green]Loading fonts..."):
        source = generate_boilerplate(backend.available_fonts(), family=family)

    if not source:
        console.print("[yellow]No matching fonts[/yellow]")
        raise SystemExit(1)
    console.print(Syntax("from swash import FontVariant\n\n\n" + source, "python"))
