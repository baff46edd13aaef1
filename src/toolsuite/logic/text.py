"""
Text tools: case converter, word counter, summarizer, diff checker and a
minimal spell checker.

Each tool is a module-level function; the catalog points the dispatcher at
them through ``lazy_module`` and the function name.
"""

import re
from typing import Any, Dict, List, Optional

CASE_TYPES = ("upper", "lower", "title", "sentence", "camel", "snake")

# Average reading speed in words per minute
READING_SPEED_WPM = 200


def _require_text(text: Any, tool_name: str) -> str:
    if not isinstance(text, str) or not text:
        raise ValueError(f"{tool_name}: Input text must be a non-empty string")
    return text


def convert_case(text: str, case_type: str) -> str:
    """
    Convert text to the given case.

    Args:
        text: Text to convert
        case_type: One of upper, lower, title, sentence, camel, snake

    Returns:
        Converted text
    """
    _require_text(text, "Case Converter")

    if case_type == "upper":
        return text.upper()
    if case_type == "lower":
        return text.lower()

    words = text.lower().split()
    if case_type == "title":
        return " ".join(word[:1].upper() + word[1:] for word in words)
    if case_type == "sentence":
        return re.sub(r"(^\w|\.\s+\w)", lambda m: m.group(0).upper(), text.lower())
    if case_type == "camel":
        return words[0] + "".join(w[:1].upper() + w[1:] for w in words[1:]) if words else ""
    if case_type == "snake":
        return "_".join(words)

    raise ValueError(f"Case Converter: Invalid case type '{case_type}'")


def case_converter(text: str, options: Optional[Dict[str, Any]] = None) -> str:
    """Entry point used by the UI: ``options`` carries ``caseType``."""
    options = options or {}
    return convert_case(text, options.get("caseType", "upper"))


def word_counter(text: str) -> Dict[str, Any]:
    """Count words, characters, sentences and paragraphs; estimate reading time."""
    if not isinstance(text, str) or not text:
        return {
            "words": 0,
            "characters": 0,
            "charactersNoSpaces": 0,
            "sentences": 0,
            "paragraphs": 0,
            "readingTimeMinutes": 0,
        }

    words = re.findall(r"\b\w+\b", text)
    sentences = re.findall(r"[.!?]+", text)
    paragraphs = [p for p in re.split(r"\n+", text) if p]

    return {
        "words": len(words),
        "characters": len(text),
        "charactersNoSpaces": len(re.sub(r"\s", "", text)),
        "sentences": len(sentences),
        "paragraphs": len(paragraphs),
        "readingTimeMinutes": round(len(words) / READING_SPEED_WPM, 2),
    }


async def text_summarizer(text: str, max_sentences: int = 3) -> str:
    """
    Summarize text by keeping its leading sentences.

    A trailing ".." marks that sentences were dropped.
    """
    _require_text(text, "Text Summarizer")
    if not isinstance(max_sentences, int) or max_sentences <= 0:
        raise ValueError("Text Summarizer: max_sentences must be a positive integer")

    sentences = [s.strip() for s in re.split(r"[.!?]+", text) if s.strip()]
    summary = ". ".join(sentences[:max_sentences])
    if summary and not re.search(r"[.!?]$", summary):
        summary += "."
    if len(sentences) > max_sentences:
        summary += ".."
    return summary


def _unique(words: List[str]) -> List[str]:
    return list(dict.fromkeys(words))


def text_diff_checker(text1: str, text2: str) -> Dict[str, List[str]]:
    """Word-level comparison of two texts (order kept, duplicates removed)."""
    if not isinstance(text1, str) or not isinstance(text2, str):
        raise ValueError("Text Diff Checker: Both inputs must be strings")

    words1 = text1.split()
    words2 = text2.split()
    set1, set2 = set(words1), set(words2)

    return {
        "added": _unique([w for w in words2 if w not in set1]),
        "removed": _unique([w for w in words1 if w not in set2]),
        "unchanged": _unique([w for w in words1 if w in set2]),
    }


# Common misspellings -> suggestions
MISSPELLINGS: Dict[str, List[str]] = {
    "teh": ["the"],
    "recieve": ["receive"],
    "seperate": ["separate"],
    "definately": ["definitely"],
    "occured": ["occurred"],
}


async def spell_checker(text: str) -> List[Dict[str, Any]]:
    """Flag words found in a small table of common misspellings."""
    _require_text(text, "Spell Checker")

    results = []
    for match in re.finditer(r"\b\w+\b", text):
        word = match.group(0)
        suggestions = MISSPELLINGS.get(word.lower())
        if suggestions:
            results.append(
                {
                    "word": word,
                    "suggestions": list(suggestions),
                    "position": {"start": match.start(), "end": match.end()},
                }
            )
    return results
