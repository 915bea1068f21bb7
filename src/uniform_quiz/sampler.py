"""Stratified Sampler: Selects questions spread evenly across categories."""

import logging
from typing import Dict, Iterable, List

from .question_bank import Question
from .shuffler import shuffle

logger = logging.getLogger(__name__)

DEFAULT_TARGET_COUNT = 50


def group_by_category(questions: Iterable[Question]) -> Dict[str, List[Question]]:
    """Partition questions by category, keeping categories in first-seen order."""
    groups: Dict[str, List[Question]] = {}
    for q in questions:
        groups.setdefault(q.category, []).append(q)
    return groups


def allocate_quotas(group_sizes: Dict[str, int], target_count: int,
                    redistribute: bool = False) -> Dict[str, int]:
    """Compute how many questions each category contributes.

    Every category gets ``target_count // k`` questions and the first
    ``target_count % k`` categories one more. A quota never exceeds the size
    of its group. With *redistribute*, slots a small category cannot fill are
    handed one at a time to the category with the lowest quota that still has
    unused questions, ties going to the earlier category.
    """
    categories = list(group_sizes)
    if not categories or target_count <= 0:
        return {c: 0 for c in categories}

    base, remainder = divmod(target_count, len(categories))
    quotas = {}
    for index, category in enumerate(categories):
        wanted = base + (1 if index < remainder else 0)
        quotas[category] = min(wanted, group_sizes[category])

    shortfall = target_count - sum(quotas.values())
    if shortfall and not redistribute:
        logger.debug(f"Accepting shortfall of {shortfall} question(s)")
    while redistribute and shortfall > 0:
        open_categories = [c for c in categories if quotas[c] < group_sizes[c]]
        if not open_categories:
            break
        category = min(open_categories, key=lambda c: quotas[c])
        quotas[category] += 1
        shortfall -= 1
    return quotas


def select_questions(bank: Iterable[Question], target_count: int = DEFAULT_TARGET_COUNT,
                     rng=None, redistribute: bool = False) -> List[Question]:
    """Draw up to *target_count* questions stratified by category.

    Each category's share is drawn uniformly at random from its group, then
    the combined selection is shuffled so category boundaries do not show in
    presentation order. The bank is not modified.
    """
    groups = group_by_category(bank)
    quotas = allocate_quotas({c: len(g) for c, g in groups.items()},
                             target_count, redistribute=redistribute)

    selected: List[Question] = []
    for category, group in groups.items():
        selected.extend(shuffle(group, rng)[:quotas[category]])

    logger.debug(
        f"Selected {len(selected)} of {target_count} requested questions "
        f"across {len(groups)} categories: {quotas}")
    return shuffle(selected, rng)
