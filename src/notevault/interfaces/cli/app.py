"""CLI application for notevault using Rich and Typer."""

import base64
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from notevault.core.config import setup_logging
from notevault.core.errors import StorageError
from notevault.core.settings import Settings, load_settings
from notevault.vault.attachments import (
    cleanup_unused_assets,
    save_attachment,
    save_image,
)
from notevault.vault.files import open_file
from notevault.vault.layout import resolve_note_context
from notevault.vault.markdown import extract_asset_paths
from notevault.vault.notes import read_note, save_note

app = typer.Typer(
    name="notevault",
    help="notevault CLI - manage notes and their assets in a vault",
    no_args_is_help=True,
)

console = Console()

VaultOption = typer.Option(None, "--vault", "-v", help="Vault root directory")
ConfigOption = typer.Option(None, "--config", "-c", help="Settings YAML file")


def _settings(vault: Optional[Path], config: Optional[Path]) -> Settings:
    """Load settings, letting --vault override the configured root."""
    try:
        settings = load_settings(config)
    except (StorageError, ValidationError) as e:
        _fail(e)
    if vault is not None:
        settings = settings.with_vault(vault.expanduser())
    return settings


def _fail(error: Exception) -> NoReturn:
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    raise typer.Exit(code=1)


def _encode_file(path: Path) -> str:
    try:
        return base64.b64encode(path.read_bytes()).decode("ascii")
    except OSError as e:
        _fail(e)


@app.command()
def resolve(
    note_path: str = typer.Argument(..., help="Vault-relative note path"),
    vault: Optional[Path] = VaultOption,
    config: Optional[Path] = ConfigOption,
):
    """Show the asset directory for a note."""
    settings = _settings(vault, config)
    try:
        context = resolve_note_context(settings, note_path)
    except StorageError as e:
        _fail(e)

    relative = context.assets_dir_relative.as_posix()
    console.print(f"[bold]relative[/bold] {relative}", soft_wrap=True)
    console.print(f"[bold]absolute[/bold] {context.assets_dir}", soft_wrap=True)


@app.command()
def refs(
    note_path: str = typer.Argument(..., help="Vault-relative note path"),
    vault: Optional[Path] = VaultOption,
    config: Optional[Path] = ConfigOption,
):
    """List the local files a note links to."""
    settings = _settings(vault, config)
    try:
        markdown = read_note(settings, note_path)
    except StorageError as e:
        _fail(e)

    references = sorted(extract_asset_paths(markdown))
    if not references:
        console.print("[dim]No local references.[/dim]")
        return

    table = Table(title=note_path, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim")
    table.add_column("Reference", style="green", overflow="fold")
    for i, reference in enumerate(references, 1):
        table.add_row(str(i), reference)
    console.print(table)


@app.command("save-note")
def save_note_command(
    note_path: str = typer.Argument(..., help="Vault-relative note path"),
    source: str = typer.Argument("-", help="Markdown file to store, '-' for stdin"),
    auto_cleanup: Optional[bool] = typer.Option(
        None,
        "--auto-cleanup/--no-auto-cleanup",
        help="Override autoCleanupAssets from settings",
    ),
    vault: Optional[Path] = VaultOption,
    config: Optional[Path] = ConfigOption,
):
    """Write a note into the vault."""
    settings = _settings(vault, config)
    if auto_cleanup is not None:
        settings = settings.model_copy(update={"auto_cleanup_assets": auto_cleanup})

    try:
        markdown = (
            sys.stdin.read()
            if source == "-"
            else Path(source).read_text(encoding="utf-8")
        )
    except (OSError, UnicodeDecodeError) as e:
        _fail(e)

    try:
        removed = save_note(settings, note_path, markdown)
    except StorageError as e:
        _fail(e)

    console.print(f"[green]Saved {escape(note_path)}[/green]", soft_wrap=True)
    for path in removed:
        console.print(f"[yellow]removed[/yellow] {escape(path)}", soft_wrap=True)


@app.command("save-image")
def save_image_command(
    note_path: str = typer.Argument(..., help="Vault-relative note path"),
    image: Path = typer.Argument(..., help="Image file to store"),
    vault: Optional[Path] = VaultOption,
    config: Optional[Path] = ConfigOption,
):
    """Copy an image into the note's asset directory."""
    settings = _settings(vault, config)
    payload = _encode_file(image)

    try:
        saved = save_image(settings, note_path, payload, image.suffix)
    except StorageError as e:
        _fail(e)

    console.print(saved.markdown, soft_wrap=True, markup=False)


@app.command("save-attachment")
def save_attachment_command(
    note_path: str = typer.Argument(..., help="Vault-relative note path"),
    attachment: Path = typer.Argument(..., help="File to attach"),
    vault: Optional[Path] = VaultOption,
    config: Optional[Path] = ConfigOption,
):
    """Copy a file into the note's asset directory."""
    settings = _settings(vault, config)
    payload = _encode_file(attachment)

    try:
        saved = save_attachment(settings, note_path, payload, attachment.name)
    except StorageError as e:
        _fail(e)

    console.print(saved.markdown, soft_wrap=True, markup=False)


@app.command()
def cleanup(
    note_path: str = typer.Argument(..., help="Vault-relative note path"),
    vault: Optional[Path] = VaultOption,
    config: Optional[Path] = ConfigOption,
):
    """Delete assets the stored note no longer links to."""
    settings = _settings(vault, config)
    try:
        markdown = read_note(settings, note_path)
        removed = cleanup_unused_assets(settings, note_path, markdown)
    except StorageError as e:
        _fail(e)

    if not removed:
        console.print("[dim]Nothing to remove.[/dim]")
        return

    for path in removed:
        console.print(f"[yellow]removed[/yellow] {escape(path)}", soft_wrap=True)
    console.print(f"[green]{len(removed)} unused asset(s) removed[/green]")


@app.command("open")
def open_command(
    path: str = typer.Argument(..., help="Vault-relative or absolute path"),
    vault: Optional[Path] = VaultOption,
    config: Optional[Path] = ConfigOption,
):
    """Open a vault file with the default application."""
    settings = _settings(vault, config)
    try:
        opened = open_file(settings, path)
    except StorageError as e:
        _fail(e)

    console.print(f"[dim]Opened {escape(str(opened))}[/dim]", soft_wrap=True)


def run_cli(argv: list[str] | None = None):
    """Entry point for the CLI."""
    setup_logging()
    app(args=argv)


if __name__ == "__main__":
    run_cli()
