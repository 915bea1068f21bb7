"""Question Bank: Loads, validates and groups multiple-choice questions."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Sequence, Tuple, Union

import yaml

from .exceptions import BankUnavailableError, MalformedQuestionError

logger = logging.getLogger(__name__)

QuestionId = Union[str, int]

YAML_SUFFIXES = (".yaml", ".yml")


@dataclass(frozen=True)
class Question:
    """A single multiple-choice question."""

    id: QuestionId
    category: str
    prompt: str
    options: Tuple[str, ...]
    correct_answer: str

    @classmethod
    def from_dict(cls, data: dict, index=None) -> "Question":
        """Build a question from a bank record, validating every field.

        Accepts the ``question``/``correctAnswer`` keys of exported quiz banks
        as well as ``prompt``/``correct_answer``.
        """
        if not isinstance(data, dict):
            raise MalformedQuestionError("record is not a mapping", index)

        qid = data.get("id")
        if qid is None or isinstance(qid, bool) or not isinstance(qid, (str, int)):
            raise MalformedQuestionError("missing or invalid 'id'", index)

        category = data.get("category")
        if not isinstance(category, str) or not category.strip():
            raise MalformedQuestionError(f"question {qid!r} has no category", index)

        prompt = data.get("question", data.get("prompt"))
        if not isinstance(prompt, str) or not prompt.strip():
            raise MalformedQuestionError(f"question {qid!r} has no prompt", index)

        options = data.get("options")
        if not isinstance(options, (list, tuple)) or len(options) < 2:
            raise MalformedQuestionError(
                f"question {qid!r} needs at least two options", index)
        if not all(isinstance(o, str) for o in options):
            raise MalformedQuestionError(
                f"question {qid!r} has non-text options", index)
        if len(set(options)) != len(options):
            raise MalformedQuestionError(
                f"question {qid!r} has duplicate options", index)

        correct = data.get("correctAnswer", data.get("correct_answer"))
        if correct not in options:
            raise MalformedQuestionError(
                f"correct answer {correct!r} of question {qid!r} is not one of its options",
                index,
            )

        return cls(
            id=qid,
            category=category,
            prompt=prompt,
            options=tuple(options),
            correct_answer=correct,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "category": self.category,
            "question": self.prompt,
            "options": list(self.options),
            "correctAnswer": self.correct_answer,
        }


class QuestionBank:
    """Immutable, validated collection of questions grouped by category."""

    def __init__(self, questions: Sequence[Question]):
        seen = set()
        for index, q in enumerate(questions):
            if q.id in seen:
                raise MalformedQuestionError(f"duplicate id {q.id!r}", index)
            seen.add(q.id)
        self._questions: Tuple[Question, ...] = tuple(questions)

    @classmethod
    def from_records(cls, records: Sequence[dict]) -> "QuestionBank":
        questions = [Question.from_dict(r, index=i) for i, r in enumerate(records)]
        return cls(questions)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "QuestionBank":
        """Load a bank from a JSON or YAML file.

        The file holds either a list of question records or a mapping with a
        ``questions`` list. Read and parse failures raise
        ``BankUnavailableError``; invalid records raise
        ``MalformedQuestionError``.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in YAML_SUFFIXES:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load question bank {path}: {e}")
            raise BankUnavailableError(f"Could not load question bank {path}: {e}") from e

        if isinstance(data, dict):
            data = data.get("questions")
        if data is None:
            data = []
        if not isinstance(data, list):
            raise BankUnavailableError(
                f"Question bank {path} must contain a list of questions")

        bank = cls.from_records(data)
        logger.info(
            f"Loaded {len(bank)} questions in {len(bank.categories())} categories from {path}")
        return bank

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    def categories(self) -> List[str]:
        """Distinct categories in order of first appearance."""
        return list(self.by_category())

    def by_category(self) -> Dict[str, List[Question]]:
        groups: Dict[str, List[Question]] = {}
        for q in self._questions:
            groups.setdefault(q.category, []).append(q)
        return groups

    def get(self, question_id: QuestionId):
        for q in self._questions:
            if q.id == question_id:
                return q
        return None

    def is_empty(self) -> bool:
        return not self._questions

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)
