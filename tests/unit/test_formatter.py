"""Tests for the result card and fixed reply texts."""

from __future__ import annotations

from results_bot.formatter import (
    SEPARATOR,
    escape_markdown,
    format_result,
    not_found_text,
)


def test_sample_record_card() -> None:
    text = format_result({"Roll": "1", "Name": "Alice", "Math": "90"})
    assert text == (
        "📊 *Student Results*\n"
        "\n"
        "👤 Name: Alice\n"
        "🎫 Admission: 1\n"
        f"{SEPARATOR}\n"
        "📚 Roll: 1\n"
        "📚 Math: 90\n"
    )


def test_separator_is_twenty_box_characters() -> None:
    assert SEPARATOR == "─" * 20


def test_header_and_separator_always_present() -> None:
    text = format_result({})
    assert "*Student Results*" in text
    assert SEPARATOR in text
    assert "Name: N/A" in text
    assert "Admission: N/A" in text


def test_admission_no_preferred_over_first_field() -> None:
    text = format_result({"Roll": "9", "Admission_No": "2024001", "Name": "Bo"})
    assert "Admission: 2024001" in text


def test_empty_admission_no_falls_back_to_first_field() -> None:
    text = format_result({"Roll": "9", "Admission_No": "", "Name": "Bo"})
    assert "Admission: 9" in text


def test_name_and_admission_no_not_repeated() -> None:
    text = format_result({"Admission_No": "2024001", "Name": "Bo", "Math": "80"})
    assert text.count("Bo") == 1
    assert text.count("2024001") == 1
    assert "📚 Math: 80" in text


def test_empty_values_and_blank_headers_skipped() -> None:
    text = format_result({"Roll": "1", "Name": "Al", "Art": "", "": "stray", "PE": "A"})
    assert "Art" not in text
    assert "stray" not in text
    assert "📚 PE: A" in text


def test_fields_follow_record_order() -> None:
    text = format_result({"Roll": "1", "Zoology": "B", "Art": "A"})
    assert text.index("Zoology") < text.index("Art")


def test_markdown_controls_escaped() -> None:
    text = format_result({"Roll": "1", "Name": "Ann_Lee", "Term_1 *Score*": "[90]"})
    assert "Name: Ann\\_Lee" in text
    assert "📚 Term\\_1 \\*Score\\*: \\[90]" in text


def test_closing_bracket_left_unescaped() -> None:
    text = format_result({"Roll": "1", "Name": "A", "Remarks": "Pass [retest]"})
    assert text.endswith("📚 Remarks: Pass \\[retest]\n")
    assert escape_markdown("]") == "]"


def test_escape_markdown_leaves_plain_text() -> None:
    assert escape_markdown("Alice 90") == "Alice 90"
    assert escape_markdown("a`b") == "a\\`b"


def test_not_found_text_contains_key() -> None:
    assert not_found_text("2") == "❌ No student found with admission number: 2"
