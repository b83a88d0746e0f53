"""Entry point for the xcstrings to Android resources converter."""

import argparse

from xcstrings_android.cli import run


def main() -> None:
    """Parse CLI arguments and run the conversion pipeline."""
    parser = argparse.ArgumentParser(
        description="Convert Apple .xcstrings files to Android strings.xml resources",
    )
    parser.add_argument(
        "xcstrings_path",
        nargs="?",
        default=None,
        help="Path to the .xcstrings file (overrides the config file)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default="config.yaml",
        help="Path to the YAML configuration file (default: config.yaml)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Android res directory to write values*/strings.xml into",
    )
    parser.add_argument(
        "--app-name",
        default=None,
        help="Add an app_name string with this value to every language",
    )
    parser.add_argument(
        "--only-language",
        default=None,
        help="Only write the strings.xml of this language code",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Render all languages without writing files",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args()
    run(
        config_path=args.config,
        xcstrings_path=args.xcstrings_path,
        output_root=args.output,
        app_name=args.app_name,
        only_language=args.only_language,
        dry_run=args.dry_run,
        verbose=args.verbose,
    )


if __name__ == "__main__":
    main()
