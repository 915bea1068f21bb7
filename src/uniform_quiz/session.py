"""Quiz Session: Immutable quiz state, replaced wholesale on every transition."""

import logging
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple

from .exceptions import (
    IncompleteSubmissionError,
    InvalidAnswerError,
    SessionFinalizedError,
    UnknownQuestionError,
)
from .option_randomizer import randomize_options
from .question_bank import Question, QuestionId
from .sampler import DEFAULT_TARGET_COUNT, select_questions
from .scoring_engine import ScoreResult, score

logger = logging.getLogger(__name__)


class SessionState(Enum):
    UNANSWERED = "unanswered"
    PARTIALLY_ANSWERED = "partially_answered"
    FULLY_ANSWERED = "fully_answered"
    FINALIZED = "finalized"


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class QuizSession:
    """One quiz run: the drawn questions, their option order and the answers so far.

    Sessions are never mutated. ``answer`` and ``submit`` return a new session,
    and starting a new test builds a fresh one with ``QuizSession.start``.
    """

    selected_questions: Tuple[Question, ...]
    option_order: Mapping[QuestionId, Tuple[str, ...]]
    answers: Mapping[QuestionId, str] = field(default_factory=lambda: _frozen({}))
    result: Optional[ScoreResult] = None
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def start(cls, bank: Iterable[Question], target_count: int = DEFAULT_TARGET_COUNT,
              rng=None, redistribute: bool = False) -> "QuizSession":
        """Sample a new question set from *bank* and shuffle each question's options."""
        questions = tuple(select_questions(bank, target_count, rng=rng,
                                           redistribute=redistribute))
        order = {qid: tuple(opts) for qid, opts in randomize_options(questions, rng).items()}
        session = cls(selected_questions=questions, option_order=_frozen(order))
        logger.info(f"Started session {session.session_id} with {len(questions)} questions")
        return session

    @property
    def finalized(self) -> bool:
        return self.result is not None

    @property
    def state(self) -> SessionState:
        if self.finalized:
            return SessionState.FINALIZED
        if not self.answers:
            # An empty session has nothing left to answer.
            if not self.selected_questions:
                return SessionState.FULLY_ANSWERED
            return SessionState.UNANSWERED
        if self.is_complete:
            return SessionState.FULLY_ANSWERED
        return SessionState.PARTIALLY_ANSWERED

    @property
    def is_complete(self) -> bool:
        return all(q.id in self.answers for q in self.selected_questions)

    def question(self, question_id: QuestionId) -> Question:
        for q in self.selected_questions:
            if q.id == question_id:
                return q
        raise UnknownQuestionError(f"Question {question_id!r} is not part of this session")

    def options_for(self, question_id: QuestionId) -> Tuple[str, ...]:
        self.question(question_id)
        return self.option_order[question_id]

    def unanswered(self) -> List[Question]:
        return [q for q in self.selected_questions if q.id not in self.answers]

    def answer(self, question_id: QuestionId, option: str) -> "QuizSession":
        """Record *option* for a question, replacing any earlier choice."""
        if self.finalized:
            raise SessionFinalizedError("Cannot change answers after submission")
        q = self.question(question_id)
        if option not in q.options:
            raise InvalidAnswerError(f"{option!r} is not an option of question {question_id!r}")
        answers = dict(self.answers)
        answers[question_id] = option
        return replace(self, answers=_frozen(answers))

    def submit(self) -> "QuizSession":
        """Score the session. Only valid once every question has an answer."""
        if self.finalized:
            raise SessionFinalizedError("Session was already submitted")
        missing = self.unanswered()
        if missing:
            raise IncompleteSubmissionError([q.id for q in missing])
        result = score(self.selected_questions, self.answers)
        logger.info(
            f"Session {self.session_id} finalized: {result.correct_count}/{result.total} "
            f"({result.overall_percent:.2f}%)")
        return replace(self, result=result)
