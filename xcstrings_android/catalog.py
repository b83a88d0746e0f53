"""Schema and loader for Apple .xcstrings String Catalog files."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Union

from pydantic import BaseModel, Field, ValidationError

from xcstrings_android.errors import CatalogIOError, InvalidUtf8Error, ParseToJsonError

logger = logging.getLogger(__name__)


class TranslationState(str, Enum):
    """Review state Xcode records on every string unit."""

    NEW = "new"
    TRANSLATED = "translated"
    NEEDS_REVIEW = "needs_review"
    STALE = "stale"


class RawTranslationValue(BaseModel, frozen=True):
    """The ``{"state", "value"}`` pair inside a ``stringUnit``."""

    state: TranslationState
    value: str


class StringUnitContainer(BaseModel, frozen=True):
    """A localization holding a single, non-plural string."""

    string_unit: RawTranslationValue = Field(alias="stringUnit")


class PluralSet(BaseModel, frozen=True):
    """The six CLDR plural slots, each optional."""

    zero: StringUnitContainer | None = None
    one: StringUnitContainer | None = None
    two: StringUnitContainer | None = None
    few: StringUnitContainer | None = None
    many: StringUnitContainer | None = None
    other: StringUnitContainer | None = None


class Variation(BaseModel, frozen=True):
    """The ``variations`` object; only plural variations are supported."""

    plural: PluralSet


class VariationContainer(BaseModel, frozen=True):
    """A localization holding plural variations."""

    variations: Variation


# Shapes are tried in order: a plain string unit first, then plural variations.
RawTranslationUnit = Annotated[
    Union[StringUnitContainer, VariationContainer],
    Field(union_mode="left_to_right"),
]


class RawEntry(BaseModel, frozen=True):
    """A single key of the catalog with its per-language localizations."""

    comment: str = ""
    localizations: dict[str, RawTranslationUnit] = Field(default_factory=dict)


class RawCatalog(BaseModel, frozen=True):
    """Top-level .xcstrings document."""

    source_language: str = Field(alias="sourceLanguage")
    version: str
    strings: dict[str, RawEntry]


def catalog_from_string(text: str) -> RawCatalog:
    """Deserialize catalog JSON text.

    Args:
        text: The full .xcstrings document.

    Returns:
        The validated raw catalog.

    Raises:
        ParseToJsonError: If the text is not JSON or does not match the schema.
    """
    try:
        return RawCatalog.model_validate_json(text)
    except ValidationError as e:
        raise ParseToJsonError(str(e)) from e


def catalog_from_bytes(raw: bytes) -> RawCatalog:
    """Decode UTF-8 bytes and deserialize them as catalog JSON.

    Raises:
        InvalidUtf8Error: If the bytes are not valid UTF-8.
        ParseToJsonError: If the decoded text is not a valid catalog.
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidUtf8Error(str(e)) from e

    return catalog_from_string(text)


def catalog_from_file(path: str | Path) -> RawCatalog:
    """Read a catalog file from disk and deserialize it.

    Raises:
        CatalogIOError: If the file cannot be read as text.
        ParseToJsonError: If the content is not a valid catalog.
    """
    file_path = Path(path)
    logger.debug("Reading catalog from %s", file_path)

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogIOError(f"{file_path}: {e}") from e

    return catalog_from_string(text)


def _catalog_to_dict(catalog: RawCatalog) -> dict[str, Any]:
    data = catalog.model_dump(mode="json", by_alias=True, exclude_none=True)

    for entry in data["strings"].values():
        if not entry["comment"]:
            del entry["comment"]
        if not entry["localizations"]:
            del entry["localizations"]

    return data


def dump_catalog(catalog: RawCatalog) -> str:
    """Serialize a raw catalog back to .xcstrings JSON.

    Uses Apple's formatting conventions: 2-space indentation, sorted keys,
    empty comments and localizations omitted.
    """
    return json.dumps(_catalog_to_dict(catalog), indent=2, sort_keys=True, ensure_ascii=False)


def save_catalog(path: str | Path, catalog: RawCatalog) -> None:
    """Write a raw catalog to disk with a trailing newline.

    Raises:
        CatalogIOError: If the file cannot be written.
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(dump_catalog(catalog))
            f.write("\n")
    except OSError as e:
        raise CatalogIOError(f"{path}: {e}") from e
