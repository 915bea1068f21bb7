"""Option Randomizer: Per-question shuffled answer orderings."""

from typing import Dict, Iterable, List

from .question_bank import Question, QuestionId
from .shuffler import shuffle


def randomize_options(questions: Iterable[Question], rng=None) -> Dict[QuestionId, List[str]]:
    """Map each question id to an independently shuffled copy of its options."""
    return {q.id: shuffle(q.options, rng) for q in questions}
