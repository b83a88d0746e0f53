"""Canonical model of a String Catalog and the normalizer that builds it."""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from operator import attrgetter

from xcstrings_android.catalog import (
    PluralSet,
    RawCatalog,
    RawEntry,
    RawTranslationValue,
    StringUnitContainer,
    TranslationState,
    VariationContainer,
)
from xcstrings_android.errors import InvalidTranslationKeyError, UnexpectedTranslationKindError

logger = logging.getLogger(__name__)

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]+")

# Unicode White_Space characters; str.strip() with no argument also drops U+001C..U+001F.
_WHITE_SPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class PluralVariate(Enum):
    """CLDR plural categories, declared in emission order."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"

    @property
    def android_key(self) -> str:
        """Value of the ``quantity`` attribute on an Android ``<item>``."""
        return self.value

    @classmethod
    def from_android_key(cls, key: str) -> "PluralVariate | None":
        """Look up a category by its Android ``quantity`` value, or return None."""
        for variate in cls:
            if variate.android_key == key:
                return variate
        return None


PluralAccessor = Callable[[PluralSet], StringUnitContainer | None]

# Plural slots are always read, and later emitted, in this order.
PLURAL_SLOTS: tuple[tuple[PluralVariate, PluralAccessor], ...] = tuple(
    (variate, attrgetter(variate.value)) for variate in PluralVariate
)


@dataclass(frozen=True)
class TranslationValue:
    """Text of one translation and its review state."""

    value: str
    state: TranslationState

    @classmethod
    def from_raw(cls, raw: RawTranslationValue) -> "TranslationValue":
        return cls(value=raw.value, state=raw.state)


@dataclass(frozen=True)
class SinglePluralVariation:
    variate: PluralVariate
    translation_value: TranslationValue


@dataclass(frozen=True)
class Localization:
    """A translation consisting of one string."""

    translation_value: TranslationValue

    def values(self) -> tuple[str, ...]:
        return (self.translation_value.value,)

    def expect_localization(self) -> TranslationValue:
        return self.translation_value

    def expect_plural_variation(self) -> tuple[SinglePluralVariation, ...]:
        raise UnexpectedTranslationKindError("plural variation", "localization")


@dataclass(frozen=True)
class PluralVariation:
    """A translation with one string per populated plural category."""

    variations: tuple[SinglePluralVariation, ...]

    def values(self) -> tuple[str, ...]:
        return tuple(single.translation_value.value for single in self.variations)

    def expect_localization(self) -> TranslationValue:
        raise UnexpectedTranslationKindError("localization", "plural variation")

    def expect_plural_variation(self) -> tuple[SinglePluralVariation, ...]:
        return self.variations


Translation = Localization | PluralVariation


@dataclass(frozen=True)
class SingleTranslation:
    """One catalog key with its translation for every language."""

    key_raw: str
    key_alphanumeric: str
    comment: str
    per_language: dict[str, Translation]


@dataclass(frozen=True)
class Localizable:
    """All catalog entries, sorted by raw key."""

    source_language: str
    entries: tuple[SingleTranslation, ...]


def alphanumeric_key(key: str) -> str:
    """Turn a catalog key into a valid Android resource name.

    Runs of characters outside ``[A-Za-z0-9]`` become a single underscore,
    surrounding underscores are dropped and the result is lowercased.

    Example:
        >>> alphanumeric_key("Hello, %@!")
        'hello'
    """
    return _NON_ALPHANUMERIC.sub("_", key.strip(_WHITE_SPACE)).strip("_").lower()


def _translation_from_unit(unit: StringUnitContainer | VariationContainer) -> Translation:
    if isinstance(unit, StringUnitContainer):
        return Localization(TranslationValue.from_raw(unit.string_unit))

    plural = unit.variations.plural
    variations = []
    for variate, accessor in PLURAL_SLOTS:
        container = accessor(plural)
        if container is not None:
            variations.append(
                SinglePluralVariation(
                    variate=variate,
                    translation_value=TranslationValue.from_raw(container.string_unit),
                )
            )

    return PluralVariation(tuple(variations))


def _normalize_entry(source_language: str, key: str, entry: RawEntry) -> SingleTranslation:
    if key.strip(_WHITE_SPACE) != key:
        logger.error("Translation key has surrounding whitespace: %r", key)
        raise InvalidTranslationKeyError(key)

    per_language: dict[str, Translation] = {}
    for language, unit in sorted(entry.localizations.items()):
        per_language[language] = _translation_from_unit(unit)

    # Keys without a source-language localization use the key itself as text.
    if source_language not in per_language:
        per_language[source_language] = Localization(
            TranslationValue(value=key, state=TranslationState.TRANSLATED)
        )
        per_language = dict(sorted(per_language.items()))

    return SingleTranslation(
        key_raw=key,
        key_alphanumeric=alphanumeric_key(key),
        comment=entry.comment,
        per_language=per_language,
    )


def normalize(catalog: RawCatalog) -> Localizable:
    """Convert a raw catalog into the canonical, key-sorted model.

    Raises:
        InvalidTranslationKeyError: If any key has leading or trailing whitespace.
    """
    entries = [
        _normalize_entry(catalog.source_language, key, entry)
        for key, entry in catalog.strings.items()
    ]
    entries.sort(key=attrgetter("key_raw"))

    logger.debug("Normalized %d catalog entries", len(entries))
    return Localizable(source_language=catalog.source_language, entries=tuple(entries))
