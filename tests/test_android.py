import json

import pytest

from xcstrings_android.android import (
    AndroidLocalizeConfig,
    AndroidWriteConfig,
    WrittenXml,
    localized_for_android,
    resource_sub_directory,
    sanitize_for_android,
)
from xcstrings_android.errors import CatalogIOError
from xcstrings_android.parse import parse_from_string
from xcstrings_android.per_language import localized_per_language


def _render(parsed, config=None):
    return localized_for_android(localized_per_language(parsed.localizable), config)


def test_sanitize_escapes_apostrophes_and_lld():
    assert sanitize_for_android("It's %1$lld items") == "It\\'s %1$d items"


@pytest.mark.parametrize("value", ["", "Hello", "%lld items", "100% <b>&amp;</b>", 'say "hi"'])
def test_sanitize_leaves_other_text_untouched(value):
    assert sanitize_for_android(value) == value


def test_minimal_catalog_end_to_end():
    parsed = parse_from_string(
        '{"sourceLanguage":"en","version":"1.0","strings":{"hello":{"localizations":'
        '{"en":{"stringUnit":{"state":"translated","value":"Hello"}}}}}}'
    )

    android = _render(parsed)

    assert android.per_language_xml["en"] == (
        '<resources>\n<string name="hello">Hello</string>\n</resources>'
    )
    assert android.written_files == ()


def test_sample_matches_expected_resources(parsed, resources_dir):
    android = _render(parsed)

    assert list(android.per_language_xml) == ["en", "nl"]
    for language, xml in android.per_language_xml.items():
        sub_directory = resource_sub_directory(language, parsed.localizable.source_language)
        expected = (resources_dir / sub_directory / "strings.xml").read_text(encoding="utf-8")
        assert xml == expected.strip()


def test_app_name_is_first_child_of_every_language(parsed):
    android = _render(parsed, AndroidLocalizeConfig(app_name="Basket"))

    for xml in android.per_language_xml.values():
        lines = xml.split("\n")
        assert lines[0] == "<resources>"
        assert lines[1] == '<string name="app_name">Basket</string>'


def test_plural_with_many_and_other_emits_two_items():
    plural = {
        "other": {"stringUnit": {"state": "translated", "value": "%lld fichiers"}},
        "many": {"stringUnit": {"state": "translated", "value": "%lld de fichiers"}},
    }
    parsed = parse_from_string(
        json.dumps(
            {
                "sourceLanguage": "fr",
                "version": "1.0",
                "strings": {"files": {"localizations": {"fr": {"variations": {"plural": plural}}}}},
            }
        )
    )

    xml = _render(parsed).per_language_xml["fr"]

    assert xml == (
        "<resources>\n"
        '<plurals name="files">\n'
        '<item quantity="many">%lld de fichiers</item>\n'
        '<item quantity="other">%lld fichiers</item>\n'
        "</plurals>\n"
        "</resources>"
    )


def test_write_all_languages(parsed, tmp_path):
    android = _render(parsed, AndroidLocalizeConfig(write=AndroidWriteConfig(output_root=tmp_path)))

    assert android.written_files == (
        WrittenXml(language_code="en", sub_directory="values"),
        WrittenXml(language_code="nl", sub_directory="values-nl"),
    )
    assert (tmp_path / "values" / "strings.xml").read_text(encoding="utf-8") == (
        android.per_language_xml["en"]
    )
    assert (tmp_path / "values-nl" / "strings.xml").read_text(encoding="utf-8") == (
        android.per_language_xml["nl"]
    )


def test_write_only_one_language(parsed, tmp_path):
    config = AndroidLocalizeConfig(
        write=AndroidWriteConfig(output_root=tmp_path, only_language="nl"),
    )

    android = _render(parsed, config)

    assert android.written_files == (WrittenXml(language_code="nl", sub_directory="values-nl"),)
    assert "en" in android.per_language_xml
    assert (tmp_path / "values-nl" / "strings.xml").is_file()
    assert not (tmp_path / "values").exists()


def test_existing_files_are_overwritten(parsed, tmp_path):
    target = tmp_path / "values-nl" / "strings.xml"
    target.parent.mkdir()
    target.write_text("stale", encoding="utf-8")

    _render(parsed, AndroidLocalizeConfig(write=AndroidWriteConfig(output_root=tmp_path)))

    assert target.read_text(encoding="utf-8").startswith("<resources>\n")


def test_missing_output_root_raises_io_error(parsed, tmp_path):
    config = AndroidLocalizeConfig(write=AndroidWriteConfig(output_root=tmp_path / "missing"))

    with pytest.raises(CatalogIOError):
        _render(parsed, config)


def test_write_failure_keeps_earlier_files(parsed, tmp_path):
    # A plain file where the nl directory should go makes the second write fail.
    (tmp_path / "values-nl").write_text("", encoding="utf-8")

    with pytest.raises(CatalogIOError):
        _render(parsed, AndroidLocalizeConfig(write=AndroidWriteConfig(output_root=tmp_path)))

    assert (tmp_path / "values" / "strings.xml").is_file()


def test_plural_with_all_categories_uses_lowercase_keys_in_cldr_order():
    plural = {
        name: {"stringUnit": {"state": "translated", "value": f"{name} %lld"}}
        for name in ["other", "many", "few", "two", "one", "zero"]
    }
    parsed = parse_from_string(
        json.dumps(
            {
                "sourceLanguage": "ar",
                "version": "1.0",
                "strings": {"days": {"localizations": {"ar": {"variations": {"plural": plural}}}}},
            }
        )
    )

    xml = _render(parsed).per_language_xml["ar"]

    assert xml == (
        "<resources>\n"
        '<plurals name="days">\n'
        '<item quantity="zero">zero %lld</item>\n'
        '<item quantity="one">one %lld</item>\n'
        '<item quantity="two">two %lld</item>\n'
        '<item quantity="few">few %lld</item>\n'
        '<item quantity="many">many %lld</item>\n'
        '<item quantity="other">other %lld</item>\n'
        "</plurals>\n"
        "</resources>"
    )
