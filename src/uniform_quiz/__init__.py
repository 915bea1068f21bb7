"""Uniform Quiz: stratified multiple-choice quiz sampling and scoring."""

from .exceptions import (
    QuizError,
    BankUnavailableError,
    MalformedQuestionError,
    EmptyBankError,
    UnknownQuestionError,
    InvalidAnswerError,
    SessionFinalizedError,
    IncompleteSubmissionError,
)
from .question_bank import Question, QuestionBank
from .shuffler import make_rng, shuffle
from .sampler import allocate_quotas, select_questions
from .option_randomizer import randomize_options
from .scoring_engine import CategoryResult, QuestionReview, ScoreResult, score
from .session import QuizSession, SessionState

__version__ = "0.1.0"
