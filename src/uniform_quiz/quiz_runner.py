"""Quiz Runner: Console loop that presents a session, collects answers and shows results."""

import logging
from typing import Optional, Sequence

from .exceptions import EmptyBankError
from .report_generator import ReportGenerator
from .sampler import DEFAULT_TARGET_COUNT
from .session import QuizSession

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("quit", "exit", "q")
SKIP_COMMANDS = ("skip", "next", "pass")
YES_ANSWERS = ("y", "yes")


class QuizRunner:
    """
    Drives quiz sessions from a question bank through the console.
    Each new test replaces the current session with a freshly sampled one.
    """

    def __init__(self, bank, report_generator: Optional[ReportGenerator] = None,
                 target_count: int = DEFAULT_TARGET_COUNT, rng=None,
                 redistribute: bool = False, max_retries: int = 2):
        self.bank = bank
        self.report = report_generator or ReportGenerator()
        self.target_count = target_count
        self.rng = rng
        self.redistribute = redistribute
        self.max_retries = max_retries
        self.session: Optional[QuizSession] = None

    def display(self, text: str):
        print(f"\n{text}")

    def listen(self, prompt: str = "Your answer: ") -> str:
        try:
            return input(f"\n{prompt}").strip()
        except (EOFError, KeyboardInterrupt):
            return "quit"

    def new_session(self) -> QuizSession:
        """Replace the current session with a newly sampled one."""
        if self.bank is None or len(self.bank) == 0:
            raise EmptyBankError("The question bank has no questions")
        self.session = QuizSession.start(
            self.bank,
            target_count=self.target_count,
            rng=self.rng,
            redistribute=self.redistribute,
        )
        return self.session

    def handle_command(self, text: str) -> Optional[str]:
        lower = text.lower().strip().rstrip(".!")
        if lower in QUIT_COMMANDS:
            return "quit"
        if lower in SKIP_COMMANDS:
            return "skip"
        return None

    def parse_choice(self, text: str, options: Sequence[str]) -> Optional[str]:
        """Resolve an option number or the option's text to the option itself."""
        text = text.strip()
        if text.isdigit():
            index = int(text)
            if 1 <= index <= len(options):
                return options[index - 1]
            return None
        for option in options:
            if option.lower() == text.lower():
                return option
        return None

    def ask_question(self, question, question_num: int, total: int) -> bool:
        """Ask one question. Returns False if the user wants to quit."""
        options = self.session.options_for(question.id)
        self.display(self.report.format_question(
            question, options, question_num, total,
            selected=self.session.answers.get(question.id),
        ))

        empty_attempts = 0
        while True:
            text = self.listen()
            if not text:
                if empty_attempts < self.max_retries:
                    empty_attempts += 1
                    self.display("Please choose an option.")
                    continue
                self.display("No answer given. Moving on.")
                return True

            command = self.handle_command(text)
            if command == "quit":
                return False
            if command == "skip":
                self.display("Skipping this question.")
                return True

            choice = self.parse_choice(text, options)
            if choice is None:
                self.display(f"Please enter a number between 1 and {len(options)}.")
                continue
            self.session = self.session.answer(question.id, choice)
            logger.debug(f"Answered question {question.id!r}")
            return True

    def run_test(self):
        """Run the current session to submission. Returns the score result, or None on quit."""
        if self.session is None:
            self.new_session()
        questions = self.session.selected_questions
        total = len(questions)
        positions = {q.id: i for i, q in enumerate(questions, start=1)}

        while not self.session.is_complete:
            for question in self.session.unanswered():
                if not self.ask_question(question, positions[question.id], total):
                    logger.info(f"Session {self.session.session_id} abandoned")
                    return None
            remaining = len(self.session.unanswered())
            if remaining:
                self.display(
                    f"{remaining} question(s) still unanswered. "
                    f"Every question needs an answer before the test can be submitted.")

        self.session = self.session.submit()
        self.display(self.report.generate_report(self.session.result))
        return self.session.result

    def run(self):
        """Run tests until the user declines a new one. Returns the last result."""
        last_result = None
        while True:
            self.new_session()
            self.display(
                f"New test with {len(self.session.selected_questions)} questions. "
                f"Enter an option number, 'skip' or 'quit'.")
            result = self.run_test()
            if result is None:
                break
            last_result = result
            again = self.listen("Start a new test? [y/N]: ").lower()
            if again not in YES_ANSWERS:
                break
        self.display("Goodbye!")
        return last_result
