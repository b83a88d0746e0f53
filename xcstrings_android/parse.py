"""Entry points that load a String Catalog and normalize it in one step."""

from dataclasses import dataclass
from pathlib import Path

from xcstrings_android.catalog import (
    RawCatalog,
    catalog_from_bytes,
    catalog_from_file,
    catalog_from_string,
)
from xcstrings_android.localizable import Localizable, normalize


@dataclass(frozen=True)
class Parsed:
    """Normalized catalog together with the raw document it came from."""

    localizable: Localizable
    catalog: RawCatalog


def _parsed(catalog: RawCatalog) -> Parsed:
    return Parsed(localizable=normalize(catalog), catalog=catalog)


def parse_from_string(text: str) -> Parsed:
    """Parse and normalize catalog JSON text.

    Raises:
        ParseToJsonError: If the text does not match the catalog schema.
        InvalidTranslationKeyError: If a key has surrounding whitespace.
    """
    return _parsed(catalog_from_string(text))


def parse_from_bytes(raw: bytes) -> Parsed:
    """Parse and normalize UTF-8 encoded catalog JSON.

    Raises:
        InvalidUtf8Error: If the bytes are not valid UTF-8.
        ParseToJsonError: If the text does not match the catalog schema.
        InvalidTranslationKeyError: If a key has surrounding whitespace.
    """
    return _parsed(catalog_from_bytes(raw))


def parse_from_file(path: str | Path) -> Parsed:
    """Read, parse and normalize a catalog file.

    Raises:
        CatalogIOError: If the file cannot be read.
        ParseToJsonError: If the content does not match the catalog schema.
        InvalidTranslationKeyError: If a key has surrounding whitespace.
    """
    return _parsed(catalog_from_file(path))
