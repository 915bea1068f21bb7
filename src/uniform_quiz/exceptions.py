"""Exception hierarchy for question bank ingestion and quiz sessions."""


class QuizError(Exception):
    """Base class for every error raised by uniform_quiz."""


class BankUnavailableError(QuizError):
    """The question bank could not be read or parsed."""


class MalformedQuestionError(QuizError):
    """A question record failed validation at ingestion."""

    def __init__(self, message: str, index=None):
        self.index = index
        if index is not None:
            message = f"Question #{index}: {message}"
        super().__init__(message)


class EmptyBankError(QuizError):
    """A quiz was requested from a bank with no questions."""


class UnknownQuestionError(QuizError):
    """An answer referenced a question that is not part of the session."""


class InvalidAnswerError(QuizError):
    """An answer is not one of the question's options."""


class SessionFinalizedError(QuizError):
    """The session has already been submitted and scored."""


class IncompleteSubmissionError(QuizError):
    """Submission attempted while some questions are still unanswered."""

    def __init__(self, missing: list):
        self.missing = list(missing)
        super().__init__(f"{len(self.missing)} question(s) still unanswered")
