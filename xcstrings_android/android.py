"""Rendering of per-language entries into Android string resource XML."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from xcstrings_android.errors import CatalogIOError
from xcstrings_android.localizable import PluralVariation
from xcstrings_android.per_language import LocalizedPerLanguage, SingleLocalizedPerLanguage

logger = logging.getLogger(__name__)

STRINGS_FILE_NAME = "strings.xml"


@dataclass(frozen=True)
class AndroidWriteConfig:
    """Where, and for which language, resource files are written."""

    output_root: Path
    only_language: str | None = None


@dataclass(frozen=True)
class AndroidLocalizeConfig:
    app_name: str = ""
    write: AndroidWriteConfig | None = None


@dataclass(frozen=True)
class WrittenXml:
    language_code: str
    sub_directory: str


@dataclass(frozen=True)
class LocalizedForAndroid:
    """Rendered XML for every language plus the files that were written."""

    per_language_xml: dict[str, str]
    written_files: tuple[WrittenXml, ...] = field(default_factory=tuple)


def sanitize_for_android(value: str) -> str:
    """Escape apostrophes and map ``$lld`` specifiers to Android's ``$d``.

    Example:
        >>> sanitize_for_android("It's %1$lld items")
        "It\\\\'s %1$d items"
    """
    return value.replace("'", "\\'").replace("$lld", "$d")


def _render_entry(entry: SingleLocalizedPerLanguage) -> str:
    translation = entry.translation

    if isinstance(translation, PluralVariation):
        lines = [f'<plurals name="{entry.key_alphanumeric}">']
        for single in translation.expect_plural_variation():
            lines.append(
                f'<item quantity="{single.variate.android_key}">'
                f"{sanitize_for_android(single.translation_value.value)}</item>"
            )
        lines.append("</plurals>")
        return "\n".join(lines)

    value = translation.expect_localization().value
    return f'<string name="{entry.key_alphanumeric}">{sanitize_for_android(value)}</string>'


def render_resources(entries: tuple[SingleLocalizedPerLanguage, ...], app_name: str = "") -> str:
    """Render one language's entries as an Android ``<resources>`` document."""
    children = [_render_entry(entry) for entry in entries]

    if app_name:
        children.insert(0, f'<string name="app_name">{app_name}</string>')

    return "<resources>\n{}\n</resources>".format("\n".join(children))


def resource_sub_directory(language: str, source_language: str) -> str:
    """Name of the ``values`` directory holding a language's resources."""
    if language == source_language:
        return "values"
    return f"values-{language}"


def _write_resources(
    per_language_xml: dict[str, str],
    source_language: str,
    write_config: AndroidWriteConfig,
) -> list[WrittenXml]:
    written: list[WrittenXml] = []
    output_root = Path(write_config.output_root)

    for language, content in per_language_xml.items():
        if write_config.only_language is not None and write_config.only_language != language:
            continue

        sub_directory = resource_sub_directory(language, source_language)
        path = output_root / sub_directory / STRINGS_FILE_NAME

        try:
            path.parent.mkdir(exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise CatalogIOError(f"{path}: {e}") from e

        logger.info("Wrote %s resources to %s", language, path)
        written.append(WrittenXml(language_code=language, sub_directory=sub_directory))

    return written


def localized_for_android(
    localized: LocalizedPerLanguage,
    config: AndroidLocalizeConfig | None = None,
) -> LocalizedForAndroid:
    """Render every language to Android XML and optionally write the files.

    Args:
        localized: Entries grouped by language.
        config: App name and write settings; defaults render in memory only.

    Returns:
        The XML of every language, sorted by language code, and the files written.

    Raises:
        CatalogIOError: If a directory or file cannot be written. Files written
            before the failure are left in place.
    """
    config = config or AndroidLocalizeConfig()

    per_language_xml = {
        language: render_resources(info.entries, config.app_name)
        for language, info in sorted(localized.per_language.items())
    }

    written: list[WrittenXml] = []
    if config.write is not None:
        written = _write_resources(per_language_xml, localized.source_language, config.write)

    return LocalizedForAndroid(per_language_xml=per_language_xml, written_files=tuple(written))
