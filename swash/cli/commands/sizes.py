"""Sizes commands - inspect dynamic type size tables."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from swash.config import Config
from swash.fonts.dynamic import resolve_dynamic_size
from swash.styles import ContentSizeCategory, PlatformClass, TextStyle, size_table

console = Console()

PLATFORM_CHOICE = click.Choice([p.value for p in PlatformClass], case_sensitive=False)
CATEGORY_CHOICE = click.Choice(
    [c.value for c in ContentSizeCategory] + ["s", "l", "xl"], case_sensitive=False
)


def _resolve_target(
    ctx: click.Context, platform: str | None, category: str | None
) -> tuple[PlatformClass, ContentSizeCategory | None]:
    config: Config = ctx.obj.get("config") or Config()
    resolved_platform = PlatformClass(platform.lower()) if platform else config.platform
    resolved_category = (
        ContentSizeCategory.parse(category) if category else config.content_size_category
    )
    return resolved_platform, resolved_category


def _format_size(value: float) -> str:
    return f"{value:g}"


@click.command()
@click.option("--platform", type=PLATFORM_CHOICE, help="Platform class (default from config)")
@click.option("--category", type=CATEGORY_CHOICE, help="Watch content size category")
@click.pass_context
def sizes(ctx: click.Context, platform: str | None, category: str | None) -> None:
    """Show the preferred size of every text style."""
    target, target_category = _resolve_target(ctx, platform, category)

    title = f"Preferred sizes ({target.value}"
    if target is PlatformClass.WATCH:
        title += f", {target_category.value if target_category else 'unknown category'}"
    title += ")"

    table = Table(title=title)
    table.add_column("Style", style="cyan")
    table.add_column("Size (pt)", style="yellow", justify="right")
    for style, value in size_table(target, target_category).items():
        table.add_row(style.value, _format_size(value))

    console.print(table)


@click.command()
@click.argument("style", type=click.Choice([s.value for s in TextStyle], case_sensitive=False))
@click.option("--platform", type=PLATFORM_CHOICE, help="Platform class (default from config)")
@click.option("--category", type=CATEGORY_CHOICE, help="Watch content size category")
@click.option("--max-size", type=float, help="Size the scaled text may not exceed")
@click.option("--default-size", type=float, help="Base size overriding the preferred size")
@click.pass_context
def size(
    ctx: click.Context,
    style: str,
    platform: str | None,
    category: str | None,
    max_size: float | None,
    default_size: float | None,
) -> None:
    """Show the base and capped size for one text style.

    STYLE: Text style name, e.g. body or title1.
    """
    target, target_category = _resolve_target(ctx, platform, category)
    try:
        dynamic = resolve_dynamic_size(
            TextStyle(style.lower()),
            target,
            target_category,
            max_size=max_size,
            default_size=default_size,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    console.print(f"[bold]Base size:[/bold] {_format_size(dynamic.base_size)}")
    if dynamic.max_size is not None:
        console.print(f"[bold]Max size:[/bold] {_format_size(dynamic.max_size)}")
    console.print(f"[bold]Capped size:[/bold] {_format_size(dynamic.capped_size)}")
