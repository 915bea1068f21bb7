"""Tests for the QuestionBank module."""
import json
import pytest
import yaml
from uniform_quiz.question_bank import Question, QuestionBank
from uniform_quiz.exceptions import BankUnavailableError, MalformedQuestionError
from conftest import make_record


SAMPLE_RECORDS = [
    make_record(1, "Networking", correct="B"),
    make_record(2, "Databases"),
    make_record(3, "Networking", correct="C"),
]


@pytest.fixture
def bank_file(tmp_path):
    path = tmp_path / "questions.json"
    path.write_text(json.dumps(SAMPLE_RECORDS))
    return path


def test_load_questions(bank_file):
    bank = QuestionBank.from_file(bank_file)
    assert len(bank) == 3
    assert [q.id for q in bank] == [1, 2, 3]


def test_load_yaml_bank_with_questions_key(tmp_path):
    path = tmp_path / "questions.yaml"
    path.write_text(yaml.safe_dump({"questions": SAMPLE_RECORDS}))
    bank = QuestionBank.from_file(path)
    assert len(bank) == 3


def test_from_dict_maps_original_keys():
    q = Question.from_dict(make_record(7, "Security", correct="D"))
    assert q.prompt == "Question 7?"
    assert q.correct_answer == "D"
    assert q.options == ("A", "B", "C", "D")


def test_from_dict_accepts_snake_case_keys():
    q = Question.from_dict({
        "id": "q1", "category": "Security", "prompt": "Pick one",
        "options": ["x", "y"], "correct_answer": "y",
    })
    assert q.id == "q1"
    assert q.correct_answer == "y"


def test_to_dict_uses_bank_format():
    record = make_record(1, "Networking", correct="B")
    assert Question.from_dict(record).to_dict() == record


def test_categories_in_first_seen_order(bank_file):
    bank = QuestionBank.from_file(bank_file)
    assert bank.categories() == ["Networking", "Databases"]
    assert [q.id for q in bank.by_category()["Networking"]] == [1, 3]


def test_get_by_id(bank_file):
    bank = QuestionBank.from_file(bank_file)
    assert bank.get(2).category == "Databases"
    assert bank.get(99) is None


def test_empty_bank_file(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("[]")
    bank = QuestionBank.from_file(path)
    assert bank.is_empty()
    assert bank.categories() == []


# --- Unavailable banks ---

def test_missing_file_raises_unavailable(tmp_path):
    with pytest.raises(BankUnavailableError):
        QuestionBank.from_file(tmp_path / "missing.json")


def test_invalid_json_raises_unavailable(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(BankUnavailableError) as exc:
        QuestionBank.from_file(path)
    assert exc.value.__cause__ is not None


def test_non_list_bank_raises_unavailable(tmp_path):
    path = tmp_path / "odd.json"
    path.write_text(json.dumps({"questions": "nope"}))
    with pytest.raises(BankUnavailableError):
        QuestionBank.from_file(path)


# --- Malformed questions ---

@pytest.mark.parametrize("field", ["id", "category", "question", "options", "correctAnswer"])
def test_missing_field_rejected(field):
    record = make_record(1, "Networking")
    del record[field]
    with pytest.raises(MalformedQuestionError):
        QuestionBank.from_records([record])


def test_correct_answer_not_in_options_rejected():
    record = make_record(1, "Networking", correct="Z")
    with pytest.raises(MalformedQuestionError) as exc:
        QuestionBank.from_records([make_record(0, "Networking"), record])
    assert exc.value.index == 1
    assert "#1" in str(exc.value)


def test_duplicate_options_rejected():
    record = make_record(1, "Networking", options=("A", "A", "B"))
    with pytest.raises(MalformedQuestionError):
        QuestionBank.from_records([record])


def test_single_option_rejected():
    record = make_record(1, "Networking", options=("A",))
    with pytest.raises(MalformedQuestionError):
        QuestionBank.from_records([record])


def test_duplicate_ids_rejected():
    with pytest.raises(MalformedQuestionError):
        QuestionBank.from_records([make_record(1, "Networking"), make_record(1, "Databases")])


def test_questions_are_immutable():
    q = Question.from_dict(make_record(1, "Networking"))
    with pytest.raises(AttributeError):
        q.correct_answer = "B"
