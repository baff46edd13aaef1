from ..categories import Category
from ..tools.base import Template, ToolDescriptor, ToolProps, lazy_module

TEXT_LOGIC = "toolsuite.logic.text"

TEXT_TOOLS = [
    ToolDescriptor(
        id="tool-case-converter",
        slug="case-converter",
        category=Category.TEXT,
        title="Case Converter",
        short_description="Convert text between upper/lower/camel case.",
        long_description=(
            "The Case Converter tool allows you to quickly change the case of your text. "
            "Convert to uppercase for emphasis, lowercase for consistency, or camel case "
            "for programming. Paste your text, select the desired case format, and get "
            "instant results."
        ),
        icon="FaFont",
        template=Template.TEXT,
        keywords=["text tools", "convert case", "upper lower camel"],
        tags=["text", "conversion", "case"],
        props=ToolProps(result_type="text"),
        loader=lazy_module(TEXT_LOGIC),
        entry_point="case_converter",
        synonyms=["uppercase", "lowercase", "capitalize"],
        handler_path="src/components/tools/CaseConverterTool.tsx",
    ),
    ToolDescriptor(
        id="tool-word-counter",
        slug="word-counter",
        category=Category.TEXT,
        title="Word Counter",
        short_description="Count words, characters, sentences and paragraphs.",
        long_description=(
            "The Word Counter gives you word, character, sentence and paragraph counts "
            "for any text, along with an estimated reading time."
        ),
        icon="FaCalculator",
        template=Template.ANALYZER,
        keywords=["word count", "character count", "reading time"],
        tags=["text", "analysis"],
        props=ToolProps(result_type="table"),
        loader=lazy_module(TEXT_LOGIC),
        entry_point="word_counter",
        handler_path="src/components/tools/WordCountTool.tsx",
    ),
    ToolDescriptor(
        id="tool-text-summarizer",
        slug="text-summarizer",
        category=Category.TEXT,
        title="Text Summarizer",
        short_description="Generate concise summaries of long text.",
        long_description=(
            "The Text Summarizer condenses long passages down to their leading "
            "sentences so you can get the gist of a document at a glance."
        ),
        icon="FaAlignJustify",
        template=Template.TEXT,
        keywords=["text summarization", "summary", "condense text"],
        tags=["text", "summary"],
        props=ToolProps(result_type="text"),
        loader=lazy_module(TEXT_LOGIC),
        entry_point="text_summarizer",
    ),
    ToolDescriptor(
        id="tool-text-diff-checker",
        slug="text-diff-checker",
        category=Category.TEXT,
        title="Text Diff Checker",
        short_description="Compare two texts and see added and removed words.",
        icon="FaExchangeAlt",
        template=Template.ANALYZER,
        keywords=["diff", "compare text", "difference"],
        tags=["text", "comparison"],
        props=ToolProps(input_type="text", result_type="json"),
        loader=lazy_module(TEXT_LOGIC),
        entry_point="text_diff_checker",
    ),
    ToolDescriptor(
        id="tool-spell-checker",
        slug="spell-checker",
        category=Category.TEXT,
        title="Spell Checker",
        short_description="Find common misspellings in your text.",
        icon="FaSpellCheck",
        template=Template.TEXT,
        keywords=["spelling", "spell check", "typos"],
        tags=["text", "spelling"],
        is_hidden=True,
        is_experimental=True,
        props=ToolProps(result_type="json"),
        loader=lazy_module(TEXT_LOGIC),
        entry_point="spell_checker",
        analytics_key="text_spell_checker",
    ),
]
