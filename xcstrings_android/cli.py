"""CLI orchestration: wires config, parser, aggregator and renderer together."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from xcstrings_android.android import (
    AndroidLocalizeConfig,
    AndroidWriteConfig,
    LocalizedForAndroid,
    localized_for_android,
    resource_sub_directory,
)
from xcstrings_android.config import AppConfig, ConversionConfig, load_config, validate_config
from xcstrings_android.errors import CatalogError, CatalogIOError
from xcstrings_android.parse import parse_from_file
from xcstrings_android.per_language import LocalizedPerLanguage, localized_per_language

console = Console()


def setup_logging(level: str = "INFO") -> None:
    """Configure logging with rich handler for colored, readable output."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _print_summary_table(
    localized: LocalizedPerLanguage,
    android: LocalizedForAndroid,
) -> None:
    """Print a summary table showing entries and word counts per language.

    Args:
        localized: Entries grouped by language.
        android: Rendering result, used to mark written directories.
    """
    written = {w.language_code: w.sub_directory for w in android.written_files}

    table = Table(title="Conversion Summary")
    table.add_column("Language", style="cyan")
    table.add_column("Entries", justify="right")
    table.add_column("Words", style="green", justify="right")
    table.add_column("Written to")

    total_words = 0
    for language, info in localized.per_language.items():
        total_words += info.word_count
        target = written.get(language)
        if target is None:
            sub_directory = resource_sub_directory(language, localized.source_language)
            target = f"[dim]{sub_directory} (skipped)[/dim]"
        table.add_row(language, str(len(info.entries)), str(info.word_count), target)

    table.add_section()
    table.add_row("[bold]Total[/bold]", "", f"[bold]{total_words}[/bold]", f"{len(written)} files")

    console.print()
    console.print(table)


def convert(
    conversion: ConversionConfig,
    dry_run: bool = False,
) -> tuple[LocalizedPerLanguage, LocalizedForAndroid]:
    """Run the full catalog to Android resources pipeline.

    Args:
        conversion: Input path, output root and rendering options.
        dry_run: Render in memory without writing any file.

    Returns:
        The per-language grouping and the rendered Android resources.

    Raises:
        CatalogError: If parsing, validation or writing fails.
    """
    logger = logging.getLogger(__name__)

    parsed = parse_from_file(conversion.xcstrings_path)
    localizable = parsed.localizable
    logger.info(
        "Parsed %d keys, source language %s",
        len(localizable.entries),
        localizable.source_language,
    )

    localized = localized_per_language(localizable)

    write_config = None
    if not dry_run:
        output_root = Path(conversion.output_root)
        try:
            output_root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CatalogIOError(f"{output_root}: {e}") from e
        write_config = AndroidWriteConfig(
            output_root=output_root,
            only_language=conversion.only_language,
        )

    android = localized_for_android(
        localized,
        AndroidLocalizeConfig(app_name=conversion.app_name, write=write_config),
    )
    return localized, android


def _apply_overrides(
    config: AppConfig,
    xcstrings_path: str | None,
    output_root: str | None,
    app_name: str | None,
    only_language: str | None,
) -> None:
    if xcstrings_path:
        config.conversion.xcstrings_path = xcstrings_path
    if output_root:
        config.conversion.output_root = output_root
    if app_name is not None:
        config.conversion.app_name = app_name
    if only_language:
        config.conversion.only_language = only_language


def run(
    config_path: str = "config.yaml",
    xcstrings_path: str | None = None,
    output_root: str | None = None,
    app_name: str | None = None,
    only_language: str | None = None,
    dry_run: bool = False,
    verbose: bool = False,
) -> None:
    """Main synchronous entry point for the CLI.

    Command line values take precedence over the configuration file. The
    configuration file may be absent when the catalog path is given directly.

    Args:
        config_path: Path to the YAML configuration file.
        xcstrings_path: Catalog to convert.
        output_root: Android ``res`` directory to write into.
        app_name: Value of the ``app_name`` string added to every language.
        only_language: Only write this language's file.
        dry_run: Render without writing files.
        verbose: Log at debug level.
    """
    setup_logging("DEBUG" if verbose else "INFO")
    logger = logging.getLogger(__name__)

    try:
        console.print("[bold cyan]XCStrings to Android Converter[/bold cyan]")
        console.print("[dim]" + "─" * 50 + "[/dim]")

        config = load_config(config_path, required=xcstrings_path is None, validate=False)
        _apply_overrides(config, xcstrings_path, output_root, app_name, only_language)
        validate_config(config)
        if not verbose:
            logging.getLogger().setLevel(config.logging.level)

        console.print(f"\n[bold]Loading xcstrings file:[/bold] {config.conversion.xcstrings_path}")
        localized, android = convert(config.conversion, dry_run=dry_run)

        if dry_run:
            console.print("\n[yellow]Dry run - no files written[/yellow]")
        else:
            console.print(
                f"\n[green bold]Saved {len(android.written_files)} resource files "
                f"to {config.conversion.output_root}[/green bold]"
            )

        _print_summary_table(localized, android)

    except FileNotFoundError as e:
        console.print(f"[red bold]Error:[/red bold] {e}")
        raise SystemExit(1)
    except ValueError as e:
        console.print(f"[red bold]Configuration error:[/red bold] {e}")
        raise SystemExit(1)
    except CatalogError as e:
        console.print(f"[red bold]Conversion failed:[/red bold] {e}")
        raise SystemExit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Conversion cancelled by user.[/yellow]")
        raise SystemExit(130)
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        raise SystemExit(1)
