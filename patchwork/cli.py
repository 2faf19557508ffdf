"""CLI for patchwork scenes.

Usage:
    python -m patchwork.cli render scene.txt -o scene.png
    python -m patchwork.cli info scene.txt
    python -m patchwork.cli transform scene.txt "rotate 1.57 0 0" "translate 10 0"
"""

import logging
from pathlib import Path as FilePath

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from patchwork.commands import CommandError, apply_command, parse_command
from patchwork.config import settings
from patchwork.logging_config import configure_logging
from patchwork.rendering import RenderOptions, render_shape
from patchwork.shapes import Image

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="patchwork",
    help="Render, inspect and transform shape scenes",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at debug level"),
) -> None:
    """Configure logging from settings before any command runs."""
    configure_logging(
        json_format=settings.log_json,
        log_level=logging.DEBUG if verbose else settings.log_level_number,
        log_file=settings.log_file,
    )


def _load_scene(path: FilePath) -> Image:
    """Read and decode a scene file, reporting dropped records."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Failed to read {path}: {e}[/red]")
        raise typer.Exit(1) from e

    image = Image()
    issues = image.deserialize(text)
    for issue in issues:
        console.print(
            f"[yellow]Skipped {issue.record} record at offset {issue.position}: "
            f"{issue.reason} ({issue.token!r})[/yellow]"
        )
    return image


# =============================================================================
# Commands
# =============================================================================


@app.command("render")
def render(
    scene: FilePath = typer.Argument(..., help="Scene text file"),
    output: FilePath | None = typer.Option(None, "--output", "-o", help="PNG file to write"),
    width: int | None = typer.Option(None, "--width", help="Surface width in pixels"),
    height: int | None = typer.Option(None, "--height", help="Surface height in pixels"),
    fit: bool = typer.Option(True, "--fit/--no-fit", help="Shrink scenes that overflow"),
) -> None:
    """Render a scene file to PNG.

    Examples:
        patchwork render scene.txt
        patchwork render scene.txt -o out.png --width 400 --height 300
    """
    image = _load_scene(scene)
    options = RenderOptions(
        width=width or settings.surface_width,
        height=height or settings.surface_height,
        background_color=settings.background_color,
        fit=fit,
        output_format="bytes",
    )
    if options.width <= 0 or options.height <= 0:
        console.print("[red]Width and height must be positive[/red]")
        raise typer.Exit(1)

    target = output or FilePath(settings.output_path)
    png = render_shape(image, options)
    assert isinstance(png, bytes)
    try:
        target.write_bytes(png)
    except OSError as e:
        console.print(f"[red]Failed to write {target}: {e}[/red]")
        raise typer.Exit(1) from e

    console.print(f"[green]Rendered {len(image)} shape(s) to {target}[/green]")


@app.command("info")
def info(
    scene: FilePath = typer.Argument(..., help="Scene text file"),
) -> None:
    """List the shapes of a scene with their measurements."""
    image = _load_scene(scene)
    shapes = image.components
    if not shapes:
        console.print("[yellow]No shapes found[/yellow]")
        return

    table = Table(title=f"Scene {scene.name}", box=box.ROUNDED)
    table.add_column("#", justify="right")
    table.add_column("Kind", style="cyan")
    table.add_column("Color", style="magenta")
    table.add_column("Area", justify="right")
    table.add_column("Perimeter", justify="right")
    table.add_column("Bounding box", style="dim")

    for index, shape in enumerate(shapes, start=1):
        bb = shape.bounding_box()
        table.add_row(
            str(index),
            shape.kind.value,
            shape.color.to_hex(),
            f"{shape.area():.2f}",
            f"{shape.perimeter():.2f}",
            f"x {bb.x_min}..{bb.x_max}  y {bb.y_min}..{bb.y_max}",
        )

    console.print(table)
    bb = image.bounding_box()
    console.print(f"Scene box: x {bb.x_min}..{bb.x_max}  y {bb.y_min}..{bb.y_max}")
    if image.annotation:
        console.print(f"Annotation: {image.annotation}")


@app.command("transform")
def transform(
    scene: FilePath = typer.Argument(..., help="Scene text file"),
    commands: list[str] = typer.Argument(..., help='Commands such as "rotate 1.57 0 0"'),
    output: FilePath | None = typer.Option(
        None, "--output", "-o", help="Write the scene here instead of stdout"
    ),
) -> None:
    """Apply transform commands to every shape of a scene.

    Examples:
        patchwork transform scene.txt "translate 10 -5"
        patchwork transform scene.txt "homothety 0.5" "axial_sym 0 0 1 0" -o out.txt
    """
    try:
        parsed = [parse_command(text) for text in commands]
    except CommandError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e

    image = _load_scene(scene)
    for command in parsed:
        apply_command(image, command)

    text = image.serialize()
    if output is None:
        typer.echo(text)
        return

    try:
        output.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Failed to write {output}: {e}[/red]")
        raise typer.Exit(1) from e
    console.print(f"[green]Wrote {len(image)} shape(s) to {output}[/green]")


# Entry point
if __name__ == "__main__":
    app()
