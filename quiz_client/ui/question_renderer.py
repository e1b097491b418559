"""Question rendering utilities for displaying quiz questions."""

from __future__ import annotations

from typing import List

from quiz_client.core.markdown_math_renderer import renderer


def render_question(number: int, question_text: str, font_size: int = 14) -> str:
    """Render a numbered question as a full HTML document for QWebEngineView."""
    markdown = f"**{number}.** {question_text.strip() or '(No question text)'}"
    return renderer.render_full_document(markdown, font_size=font_size)


def render_question_with_options(
    question_text: str,
    options: List[str],
    correct_answer: str | None = None,
    font_size: int = 12,
) -> str:
    """Render a question with its options as HTML.

    Args:
        question_text: The question text (supports Markdown and LaTeX)
        options: Option strings in display order
        correct_answer: Option to flag as correct, if any
        font_size: Font size in points for the question text

    Returns:
        HTML string ready for display in QWebEngineView
    """
    markdown_lines = [question_text.strip() or "(No question text)", ""]
    for idx, option in enumerate(options):
        marker = " **(Correct)**" if correct_answer and option == correct_answer else ""
        markdown_lines.append(f"**{idx + 1}.** {option or '(empty)'}{marker}")
    markdown = "\n\n".join(markdown_lines)
    return renderer.render_full_document(markdown, font_size=font_size)
