import pytest
from pydantic import ValidationError

from tests.conftest import make_entry
from transly.schemas.translation import (
    LANGUAGES,
    TranslationEntry,
    create_entry,
    get_opposite_language,
    is_language,
)


class TestGetOppositeLanguage:
    def test_en_to_ja(self) -> None:
        assert get_opposite_language("en") == "ja"

    def test_ja_to_en(self) -> None:
        assert get_opposite_language("ja") == "en"

    @pytest.mark.parametrize("language", LANGUAGES)
    def test_never_returns_same_language(self, language: str) -> None:
        assert get_opposite_language(language) != language  # type: ignore[arg-type]

    @pytest.mark.parametrize("language", LANGUAGES)
    def test_involution(self, language: str) -> None:
        opposite = get_opposite_language(language)  # type: ignore[arg-type]
        assert get_opposite_language(opposite) == language
        assert opposite in LANGUAGES


class TestIsLanguage:
    @pytest.mark.parametrize("value", ["en", "ja"])
    def test_supported(self, value: str) -> None:
        assert is_language(value)

    @pytest.mark.parametrize("value", ["ko", "EN", "", None, 1, ["en"]])
    def test_unsupported(self, value: object) -> None:
        assert not is_language(value)


class TestTranslationEntry:
    def test_same_language_pair_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_entry(source_language="en", target_language="en")

    def test_unknown_language_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_entry(source_language="ko")

    @pytest.mark.parametrize("field", ["id", "source_text", "translated_text", "romanization"])
    def test_lone_surrogate_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            make_entry(**{field: "\ud800x"})

    def test_romanization_optional(self) -> None:
        entry = make_entry(romanization=None)
        assert entry.romanization is None

    def test_frozen(self) -> None:
        entry = make_entry()
        with pytest.raises(ValidationError):
            entry.source_text = "changed"  # type: ignore[misc]

    def test_camel_case_aliases(self) -> None:
        entry = TranslationEntry.model_validate(
            {
                "id": "abc",
                "sourceText": "こんにちは",
                "translatedText": "Hello",
                "sourceLanguage": "ja",
                "targetLanguage": "en",
                "timestamp": 1,
            }
        )
        dumped = entry.model_dump(by_alias=True)

        assert dumped["sourceText"] == "こんにちは"
        assert dumped["targetLanguage"] == "en"
        assert dumped["romanization"] is None


class TestCreateEntry:
    def test_assigns_id_and_timestamp(self) -> None:
        entry = create_entry("Hello", "こんにちは", "en", "ja", romanization="konnichiwa")

        assert entry.id
        assert entry.timestamp > 0
        assert entry.romanization == "konnichiwa"

    def test_ids_are_unique(self) -> None:
        first = create_entry("a", "b", "en", "ja")
        second = create_entry("a", "b", "en", "ja")
        assert first.id != second.id

    def test_timestamps_non_decreasing(self) -> None:
        entries = [create_entry("a", "b", "ja", "en") for _ in range(20)]
        timestamps = [e.timestamp for e in entries]
        assert timestamps == sorted(timestamps)
