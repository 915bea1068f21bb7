"""Command-line entry point for Uniform Quiz."""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from .exceptions import QuizError
from .question_bank import QuestionBank
from .quiz_runner import QuizRunner
from .report_generator import ReportGenerator
from .sampler import DEFAULT_TARGET_COUNT
from .shuffler import make_rng

logger = logging.getLogger(__name__)


def load_config(path) -> dict:
    """Read the YAML config file; a missing file yields an empty config."""
    config_path = Path(path)
    if not config_path.exists():
        return {}
    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Stratified multiple-choice quiz")
    parser.add_argument("--config", default="config.yaml", help="Config file path")
    parser.add_argument("--questions", default=None, help="Question bank path (JSON or YAML)")
    parser.add_argument("--count", type=int, default=None, help="Number of questions per test")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible tests")
    parser.add_argument("--redistribute", action="store_true", default=None,
                        help="Fill small categories' shortfall from other categories")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Could not read config {args.config}: {e}")
        return 1
    quiz_cfg = config.get("quiz", {}) or {}

    bank_path = args.questions or quiz_cfg.get("question_bank", "data/questions.json")
    target_count = args.count if args.count is not None else quiz_cfg.get(
        "target_count", DEFAULT_TARGET_COUNT)
    seed = args.seed if args.seed is not None else quiz_cfg.get("seed")
    redistribute = args.redistribute if args.redistribute is not None else quiz_cfg.get(
        "redistribute_shortfall", False)

    try:
        bank = QuestionBank.from_file(bank_path)
        rng = make_rng(seed)
        runner = QuizRunner(
            bank=bank,
            report_generator=ReportGenerator(rng=rng),
            target_count=target_count,
            rng=rng,
            redistribute=bool(redistribute),
        )
        runner.run()
    except QuizError as e:
        logger.error(f"Quiz failed: {e}")
        print(f"\n{e}. Please check the question bank and try again.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
