"""Report Generator: Text for question prompts and quiz results."""

import random
from typing import Sequence


NO_ANSWER = "No answer"

HIGH_SCORE_TEMPLATES = [
    "Outstanding performance!",
    "Excellent work, you really know this material!",
]

MID_SCORE_TEMPLATES = [
    "Good work! Keep practicing.",
    "Solid result, a little more review will get you there.",
]

LOW_SCORE_TEMPLATES = [
    "Keep studying, you'll improve with practice!",
    "Review the categories below and try a new test.",
]


class ReportGenerator:
    """Formats questions and score results for the console."""

    def __init__(self, rng=None):
        self._rng = rng or random.Random()

    def format_question(self, question, options: Sequence[str], question_num: int,
                        total: int, selected=None) -> str:
        """Category header, numbered prompt and numbered options."""
        lines = [
            f"[{question.category}]",
            f"{question_num}/{total}. {question.prompt}",
        ]
        for i, option in enumerate(options, start=1):
            marker = "*" if option == selected else " "
            lines.append(f" {marker}{i}) {option}")
        return "\n".join(lines)

    def format_total(self, result) -> str:
        return (
            f"Your total score: {result.overall_percent:.2f}% "
            f"({result.correct_count} of {result.total} correct)"
        )

    def format_category_breakdown(self, result) -> str:
        lines = ["Results by category:"]
        for category, stats in result.by_category.items():
            lines.append(
                f"  {category}: {stats.correct} of {stats.total} correct "
                f"({stats.percent:.1f}%)"
            )
        return "\n".join(lines)

    def format_review(self, result) -> str:
        """Per-question review listing the given and the correct answer."""
        lines = []
        for num, review in enumerate(result.reviews, start=1):
            mark = "+" if review.is_correct else "-"
            lines.append(f"[{review.category}] {num}. {review.prompt}")
            lines.append(f"  {mark} Your answer: {review.selected or NO_ANSWER}")
            lines.append(f"    Correct answer: {review.correct_answer}")
        return "\n".join(lines)

    def generate_closing(self, result) -> str:
        pct = result.overall_percent
        if pct >= 80:
            return self._rng.choice(HIGH_SCORE_TEMPLATES)
        elif pct >= 60:
            return self._rng.choice(MID_SCORE_TEMPLATES)
        return self._rng.choice(LOW_SCORE_TEMPLATES)

    def generate_report(self, result, include_review: bool = True) -> str:
        """Full results text: total, closing remark, categories and review."""
        sections = [
            f"{self.format_total(result)} {self.generate_closing(result)}",
            self.format_category_breakdown(result),
        ]
        if include_review and result.reviews:
            sections.append(self.format_review(result))
        return "\n\n".join(sections)
