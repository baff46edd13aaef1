"""Tests for the text tools."""

import pytest

from toolsuite.logic.text import (
    case_converter,
    convert_case,
    spell_checker,
    text_diff_checker,
    text_summarizer,
    word_counter,
)


class TestCaseConverter:
    @pytest.mark.parametrize(
        "case_type,expected",
        [
            ("upper", "HELLO BIG WORLD"),
            ("lower", "hello big world"),
            ("title", "Hello Big World"),
            ("camel", "helloBigWorld"),
            ("snake", "hello_big_world"),
        ],
    )
    def test_cases(self, case_type, expected):
        assert convert_case("hello BIG world", case_type) == expected

    def test_sentence_case(self):
        assert convert_case("HELLO THERE. GENERAL KENOBI", "sentence") == "Hello there. General kenobi"

    def test_options_entry_point(self):
        assert case_converter("Hello World", {"caseType": "lower"}) == "hello world"

    def test_invalid_case_type(self):
        with pytest.raises(ValueError, match="Invalid case type"):
            convert_case("text", "shouty")

    def test_empty_text(self):
        with pytest.raises(ValueError, match="non-empty"):
            convert_case("", "upper")


class TestWordCounter:
    def test_counts(self):
        result = word_counter("One two three. Four five!\nSix.")
        assert result["words"] == 6
        assert result["sentences"] == 3
        assert result["paragraphs"] == 2
        assert result["characters"] == len("One two three. Four five!\nSix.")
        assert result["readingTimeMinutes"] == 0.03

    def test_empty(self):
        assert word_counter("")["words"] == 0


class TestSummarizer:
    @pytest.mark.asyncio
    async def test_keeps_leading_sentences(self):
        text = "First point. Second point. Third point. Fourth point."
        assert await text_summarizer(text, 2) == "First point. Second point..."

    @pytest.mark.asyncio
    async def test_short_text_unchanged(self):
        assert await text_summarizer("Only one sentence") == "Only one sentence."

    @pytest.mark.asyncio
    async def test_rejects_bad_max(self):
        with pytest.raises(ValueError):
            await text_summarizer("Text.", 0)


class TestDiffChecker:
    def test_diff(self):
        result = text_diff_checker("the quick brown fox", "the slow brown dog dog")
        assert result == {
            "added": ["slow", "dog"],
            "removed": ["quick", "fox"],
            "unchanged": ["the", "brown"],
        }

    def test_rejects_non_strings(self):
        with pytest.raises(ValueError):
            text_diff_checker("a", None)


class TestSpellChecker:
    @pytest.mark.asyncio
    async def test_finds_misspelling_positions(self):
        results = await spell_checker("I saw teh cat")
        assert results == [
            {"word": "teh", "suggestions": ["the"], "position": {"start": 6, "end": 9}}
        ]
