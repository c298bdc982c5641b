"""Reply texts, including the rendered student result card (Telegram legacy Markdown)."""

from __future__ import annotations

import re

from results_bot.models import StudentRecord

WELCOME_TEXT = (
    "🎓 Welcome to Student Results Bot!\n\n"
    "Send your admission number to check results.\n"
    "Example: 2024001"
)
ERROR_TEXT = "⚠️ Error processing request"

NAME_FIELD = "Name"
ADMISSION_FIELD = "Admission_No"
EMPTY_MARKER = "N/A"
SEPARATOR = "─" * 20

_MARKDOWN_SPECIAL = re.compile(r"([_*`\[])")


def escape_markdown(text: str) -> str:
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def not_found_text(admission_no: str) -> str:
    return f"❌ No student found with admission number: {escape_markdown(admission_no)}"


def _admission_value(record: StudentRecord) -> str:
    if record.get(ADMISSION_FIELD):
        return record[ADMISSION_FIELD]
    first_value = next(iter(record.values()), "")
    return first_value or EMPTY_MARKER


def format_result(record: StudentRecord) -> str:
    """Render a record as a result card.

    Name and admission number come first; every other non-empty field
    follows in sheet column order.
    """
    lines = [
        "📊 *Student Results*",
        "",
        f"👤 Name: {escape_markdown(record.get(NAME_FIELD) or EMPTY_MARKER)}",
        f"🎫 Admission: {escape_markdown(_admission_value(record))}",
        SEPARATOR,
    ]
    for field, value in record.items():
        if field in (NAME_FIELD, ADMISSION_FIELD) or not field or not value:
            continue
        lines.append(f"📚 {escape_markdown(field)}: {escape_markdown(value)}")
    return "\n".join(lines) + "\n"
