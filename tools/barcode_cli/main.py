"""
CLI tool for validating, encoding, rendering and storing EAN-13 barcodes.

Usage:
    python -m tools.barcode_cli.main validate 4006381333931
    ean13 render 4006381333931 -o barcode.png --caption
    ean13 save 4006381333931 --source scanner
"""

import sys
from dataclasses import replace
from pathlib import Path
from typing import NoReturn

import click  # type: ignore
import structlog

from src.barcode import (
    BarcodeError,
    compute_check_digit,
    decode_module_pattern,
    encode_module_pattern,
    ensure_valid_ean13,
    format_grouped,
    render_ean13,
    validate_ean13_checksum,
)
from src.config import configure_logging, get_settings
from src.models import CaptureSource
from src.storage import BarcodeStore, JsonFileBarcodeStore, StoreEvent, get_store

logger = structlog.get_logger(__name__)


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _log_store_event(event: StoreEvent, record) -> None:
    logger.debug("Store changed", store_event=event.value, code=record.code if record else None)


@click.group()
@click.option(
    "--store",
    "store_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Barcode store file (defaults to STORE_PATH setting)",
)
@click.pass_context
def cli(ctx: click.Context, store_path: Path | None) -> None:
    """EAN-13 barcode toolkit."""
    settings = get_settings()
    configure_logging(settings)
    if store_path:
        store: BarcodeStore = JsonFileBarcodeStore(
            store_path, strict_checksum=settings.strict_checksum
        )
    else:
        store = get_store()
    store.subscribe(_log_store_event)
    ctx.obj = {"settings": settings, "store": store}


@cli.command()
@click.argument("code")
@click.option("--strict/--no-strict", default=None, help="Also require a correct check digit")
@click.pass_context
def validate(ctx: click.Context, code: str, strict: bool | None) -> None:
    """Check that CODE is an acceptable EAN-13 value."""
    if strict is None:
        strict = ctx.obj["settings"].strict_checksum
    try:
        ensure_valid_ean13(code, strict=strict)
    except BarcodeError as e:
        _fail(str(e))

    checksum = "valid" if validate_ean13_checksum(code) else "invalid"
    click.echo(f"{format_grouped(code)} (checksum {checksum})")


@cli.command("check-digit")
@click.argument("body")
def check_digit(body: str) -> None:
    """Print the EAN-13 check digit for a 12-digit BODY."""
    try:
        digit = compute_check_digit(body)
    except BarcodeError as e:
        _fail(str(e))
    click.echo(f"{digit}")


@cli.command("format")
@click.argument("code")
def format_code(code: str) -> None:
    """Print CODE grouped as D-DDDDDD-DDDDD-D."""
    click.echo(format_grouped(code))


@cli.command()
@click.argument("code")
def encode(code: str) -> None:
    """Print the 113-module bar/space pattern for CODE."""
    try:
        click.echo(encode_module_pattern(code))
    except BarcodeError as e:
        _fail(str(e))


@cli.command()
@click.argument("pattern")
def decode(pattern: str) -> None:
    """Recover the EAN-13 digits from a module PATTERN."""
    try:
        click.echo(decode_module_pattern(pattern))
    except BarcodeError as e:
        _fail(str(e))


@cli.command()
@click.argument("code")
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="PNG file to write",
)
@click.option("--caption/--no-caption", default=None, help="Draw the grouped digits below the bars")
@click.option("--module-width", type=int, default=None, help="Module width in pixels")
@click.option("--bar-height", type=int, default=None, help="Guard bar height in pixels")
@click.pass_context
def render(
    ctx: click.Context,
    code: str,
    output: Path,
    caption: bool | None,
    module_width: int | None,
    bar_height: int | None,
) -> None:
    """Render CODE as a PNG barcode image."""
    geometry = ctx.obj["settings"].render_geometry()
    overrides: dict[str, object] = {}
    if caption is not None:
        overrides["show_caption"] = caption
    if module_width is not None:
        overrides["module_width"] = module_width
    if bar_height is not None:
        overrides["bar_height"] = bar_height
    geometry = replace(geometry, **overrides)

    try:
        bitmap = render_ean13(code, geometry)
    except BarcodeError as e:
        _fail(str(e))

    output.write_bytes(bitmap.to_png())
    click.echo(f"Barcode written to: {output} ({bitmap.width}x{bitmap.height})")


@cli.command()
@click.argument("code")
@click.option(
    "--source",
    type=click.Choice([s.value for s in CaptureSource]),
    default=CaptureSource.MANUAL.value,
    help="How the code was captured",
)
@click.pass_context
def save(ctx: click.Context, code: str, source: str) -> None:
    """Validate and store CODE, replacing any stored barcode."""
    store: BarcodeStore = ctx.obj["store"]
    try:
        record = store.save(code, CaptureSource(source))
    except BarcodeError as e:
        _fail(str(e))
    click.echo(f"Saved barcode: {record.formatted}")


@cli.command()
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also render the stored barcode to this PNG file",
)
@click.pass_context
def show(ctx: click.Context, output: Path | None) -> None:
    """Show the stored barcode."""
    store: BarcodeStore = ctx.obj["store"]
    record = store.get()
    if record is None:
        _fail("No barcode stored")

    valid = "✓" if record.checksum_valid else "✗"
    click.echo(f"{record.formatted}  checksum {valid}  source {record.source.value}")

    if output:
        try:
            bitmap = render_ean13(record.code, ctx.obj["settings"].render_geometry())
        except BarcodeError as e:
            _fail(str(e))
        output.write_bytes(bitmap.to_png())
        click.echo(f"Barcode written to: {output}")


@cli.command()
@click.pass_context
def delete(ctx: click.Context) -> None:
    """Delete the stored barcode."""
    store: BarcodeStore = ctx.obj["store"]
    if not store.delete():
        _fail("No barcode stored")
    click.echo("Barcode deleted")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
