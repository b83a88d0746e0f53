"""Regrouping of normalized catalog entries by target language."""

import logging
from collections import defaultdict
from dataclasses import dataclass

from xcstrings_android.localizable import Localizable, Translation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SingleLocalizedPerLanguage:
    key_raw: str
    key_alphanumeric: str
    translation: Translation
    comment: str


@dataclass(frozen=True)
class LocalizedPerLanguageInfo:
    """Entries of one language, in catalog key order."""

    word_count: int
    entries: tuple[SingleLocalizedPerLanguage, ...]


@dataclass(frozen=True)
class LocalizedPerLanguage:
    source_language: str
    per_language: dict[str, LocalizedPerLanguageInfo]


def word_count(translation: Translation) -> int:
    """Count whitespace-separated words over every text of a translation."""
    return sum(len(value.split()) for value in translation.values())


def localized_per_language(localizable: Localizable) -> LocalizedPerLanguage:
    """Group the entries of a localizable by language.

    Entries keep the order of ``localizable.entries``; languages are sorted by code.
    """
    entries: dict[str, list[SingleLocalizedPerLanguage]] = defaultdict(list)
    word_counts: dict[str, int] = defaultdict(int)

    for entry in localizable.entries:
        for language, translation in entry.per_language.items():
            entries[language].append(
                SingleLocalizedPerLanguage(
                    key_raw=entry.key_raw,
                    key_alphanumeric=entry.key_alphanumeric,
                    translation=translation,
                    comment=entry.comment,
                )
            )
            word_counts[language] += word_count(translation)

    per_language: dict[str, LocalizedPerLanguageInfo] = {}
    for language in sorted(entries):
        logger.debug("Language: %s word count: %d", language, word_counts[language])
        per_language[language] = LocalizedPerLanguageInfo(
            word_count=word_counts[language],
            entries=tuple(entries[language]),
        )

    return LocalizedPerLanguage(
        source_language=localizable.source_language,
        per_language=per_language,
    )
