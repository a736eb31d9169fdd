"""Prompt templates sent to the model, one per detected input format."""

from __future__ import annotations

from output_enhancer.domain.value_objects import FormatTag

# Backslashes are literal here: the model is told to write "\033[31m" etc.
FORMATTING_RULES = (
    "Use ANSI escape codes for emphasis: \\033[31m for red, \\033[32m for green, "
    "\\033[33m for yellow, \\033[34m for blue, \\033[1m for bold and \\033[0m to reset. "
    "For text wrapped in ** (e.g., **something**), apply bold formatting. "
    "For text prefixed with a color name followed by [**text**] (e.g., yellow[**All Clear!**]), "
    "apply the specified color and bold formatting. Supported colors are red, green, yellow and blue. "
    "Use icons (e.g., ★, ►, ✔) or emojis for clarity. "
    "Do not use markdown code blocks (e.g., ```) or any markdown tables; "
    "output plain text with ANSI codes only."
)

CLOSING_ANALYSIS = (
    "Finish with a short closing analysis that interprets what the data means as a whole."
)

JSON_TEMPLATE = (
    "Act as a data analyst do not talk to me. Analyze the provided JSON data and provide "
    "concise insights or conclusions. Highlight key points, patterns, trends, or notable "
    "observations. Do not repeat the data; focus on interpretation. "
    f"{FORMATTING_RULES} {CLOSING_ANALYSIS} Here's the data:\n\n"
)

TABLE_TEMPLATE = (
    "Act as a data analyst do not talk to me. Analyze the provided table data and provide "
    "concise, actionable insights or conclusions. Identify potential issues, and suggest next "
    "steps if applicable. Do not repeat the data; focus on interpretation. "
    f"{FORMATTING_RULES} {CLOSING_ANALYSIS} Here's the data:\n\n"
)

PLAIN_TEXT_TEMPLATE = (
    "Act as a command-line output enhancer do not talk to me. Transform the raw output from a "
    "command into a highly readable and visually appealing format suitable for a terminal, "
    "removing unnecessary data (resume the information). "
    f"{FORMATTING_RULES} Here's the output to enhance:\n\n"
)

_TEMPLATES = {
    FormatTag.JSON: JSON_TEMPLATE,
    FormatTag.TABLE: TABLE_TEMPLATE,
    FormatTag.PLAIN_TEXT: PLAIN_TEXT_TEMPLATE,
}


def build_prompt(fmt: FormatTag, text: str) -> str:
    """Wrap the raw *text* in the instruction template for *fmt*."""
    return _TEMPLATES[fmt] + text
