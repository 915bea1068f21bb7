"""Scoring Engine: Grades submitted answers overall and per category."""

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from .question_bank import Question, QuestionId

logger = logging.getLogger(__name__)


def percent(correct: int, total: int) -> float:
    """Percentage of *correct* out of *total*; an empty total scores 0.0."""
    if total <= 0:
        return 0.0
    return (correct / total) * 100


class CategoryResult:
    """Correct and total counts for one category."""

    def __init__(self, correct: int = 0, total: int = 0):
        self.correct = correct
        self.total = total

    @property
    def percent(self) -> float:
        return percent(self.correct, self.total)

    def to_dict(self) -> dict:
        return {"correct": self.correct, "total": self.total, "percent": self.percent}

    def __eq__(self, other):
        if not isinstance(other, CategoryResult):
            return NotImplemented
        return (self.correct, self.total) == (other.correct, other.total)

    def __repr__(self):
        return f"CategoryResult(correct={self.correct}, total={self.total})"


class QuestionReview:
    """How a single question was answered."""

    def __init__(self, question_id: QuestionId, category: str, prompt: str,
                 selected: Optional[str], correct_answer: str, is_correct: bool):
        self.question_id = question_id
        self.category = category
        self.prompt = prompt
        self.selected = selected  # None when unanswered
        self.correct_answer = correct_answer
        self.is_correct = is_correct

    @property
    def answered(self) -> bool:
        return self.selected is not None

    def to_dict(self) -> dict:
        return {
            "question_id": self.question_id,
            "category": self.category,
            "prompt": self.prompt,
            "selected": self.selected,
            "correct_answer": self.correct_answer,
            "is_correct": self.is_correct,
        }


class ScoreResult:
    """Holds the outcome of grading a question set."""

    def __init__(self, correct_count: int, total: int,
                 by_category: Dict[str, CategoryResult], reviews: List[QuestionReview]):
        self.correct_count = correct_count
        self.total = total
        self.by_category = by_category
        self.reviews = reviews

    @property
    def overall_percent(self) -> float:
        return percent(self.correct_count, self.total)

    def to_dict(self) -> dict:
        return {
            "overall_percent": self.overall_percent,
            "correct_count": self.correct_count,
            "total": self.total,
            "by_category": {c: r.to_dict() for c, r in self.by_category.items()},
            "reviews": [r.to_dict() for r in self.reviews],
        }


def is_correct(question: Question, answer: Optional[str]) -> bool:
    return answer is not None and answer == question.correct_answer


def score(questions: Sequence[Question], answers: Mapping[QuestionId, str]) -> ScoreResult:
    """Grade *answers* against *questions*.

    Unanswered questions count as incorrect. Categories appear in the order
    their first question appears in *questions*.
    """
    by_category: Dict[str, CategoryResult] = {}
    reviews: List[QuestionReview] = []
    correct_count = 0

    for q in questions:
        stats = by_category.setdefault(q.category, CategoryResult())
        stats.total += 1
        selected = answers.get(q.id)
        right = is_correct(q, selected)
        if right:
            stats.correct += 1
            correct_count += 1
        reviews.append(QuestionReview(
            question_id=q.id,
            category=q.category,
            prompt=q.prompt,
            selected=selected,
            correct_answer=q.correct_answer,
            is_correct=right,
        ))

    result = ScoreResult(correct_count, len(questions), by_category, reviews)
    logger.debug(
        f"Scored {correct_count}/{len(questions)} "
        f"({result.overall_percent:.2f}%) across {len(by_category)} categories")
    return result
