"""Shared fixtures for the test suite."""
import pytest
from uniform_quiz.question_bank import QuestionBank


def make_record(qid, category, correct="A", options=("A", "B", "C", "D")):
    return {
        "id": qid,
        "category": category,
        "question": f"Question {qid}?",
        "options": list(options),
        "correctAnswer": correct,
    }


def make_bank(sizes):
    """Build a bank from a {category: count} mapping with sequential ids."""
    records = []
    qid = 1
    for category, count in sizes.items():
        for _ in range(count):
            records.append(make_record(qid, category))
            qid += 1
    return QuestionBank.from_records(records)


@pytest.fixture
def small_bank():
    return make_bank({"Networking": 4, "Databases": 4, "Security": 4})


@pytest.fixture
def large_bank():
    return make_bank({"Networking": 30, "Databases": 30, "Security": 30})
