from xcstrings_android.catalog import TranslationState
from xcstrings_android.localizable import (
    Localization,
    PluralVariate,
    PluralVariation,
    SinglePluralVariation,
    TranslationValue,
)
from xcstrings_android.per_language import localized_per_language, word_count


def test_languages_are_grouped_and_sorted(parsed):
    localized = localized_per_language(parsed.localizable)

    assert localized.source_language == "en"
    assert list(localized.per_language) == ["en", "nl"]


def test_buckets_keep_key_order(parsed):
    localized = localized_per_language(parsed.localizable)

    en_keys = [e.key_raw for e in localized.per_language["en"].entries]
    nl_keys = [e.key_alphanumeric for e in localized.per_language["nl"].entries]

    assert en_keys == [e.key_raw for e in parsed.localizable.entries]
    assert nl_keys == [
        "lld_items",
        "cancel",
        "don_t_save",
        "hello",
        "welcome_back",
        "you_ve_got_1_lld_new_messages",
    ]


def test_word_counts(parsed):
    localized = localized_per_language(parsed.localizable)

    assert localized.per_language["en"].word_count == 17
    assert localized.per_language["nl"].word_count == 16


def test_entries_carry_comment(parsed):
    localized = localized_per_language(parsed.localizable)

    settings = localized.per_language["en"].entries[-1]
    assert settings.key_raw == "settings.title"
    assert settings.comment == "Title of the settings screen"


def test_word_count_sums_plural_variants():
    translation = PluralVariation(
        (
            SinglePluralVariation(
                PluralVariate.ONE, TranslationValue("one  apple", TranslationState.TRANSLATED)
            ),
            SinglePluralVariation(
                PluralVariate.OTHER, TranslationValue("%lld apples\tin total", TranslationState.NEW)
            ),
        )
    )

    assert word_count(translation) == 6
    assert word_count(Localization(TranslationValue("   ", TranslationState.NEW))) == 0
