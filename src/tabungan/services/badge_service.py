"""Achievement badge evaluation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, List, Tuple

from .ranking import deposit_count, net_balance
from .records import BadgeAward
from .storage import AwardOutcome, SavingsStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BadgeRule:
    name: str
    condition: Callable[[int, Decimal], bool]


# Count rules look at verified deposits only while amount rules use the net
# balance, so a withdrawal can block an amount badge but never a count badge.
BADGE_RULES: Tuple[BadgeRule, ...] = (
    BadgeRule("Penabung Pemula", lambda count, balance: count >= 1),
    BadgeRule("Penabung Rajin", lambda count, balance: count >= 5),
    BadgeRule("Penabung Hebat", lambda count, balance: count >= 10),
    BadgeRule("Tabungan 10K", lambda count, balance: balance >= Decimal("10000")),
    BadgeRule("Tabungan 50K", lambda count, balance: balance >= Decimal("50000")),
    BadgeRule("Tabungan 100K", lambda count, balance: balance >= Decimal("100000")),
)


def evaluate_badges(store: SavingsStore, student_id: int) -> List[BadgeAward]:
    """Award every newly satisfied badge once and return the new awards."""

    transactions = store.list_verified_transactions(student_id)
    count = deposit_count(transactions)
    balance = net_balance(transactions)
    held = set(store.list_awarded_badge_names(student_id))

    awards: List[BadgeAward] = []
    for rule in BADGE_RULES:
        if rule.name in held or not rule.condition(count, balance):
            continue
        result = store.award_badge(student_id, rule.name)
        if result.outcome is AwardOutcome.DUPLICATE:
            continue
        logger.info("awarded badge %r to student %s", rule.name, student_id)
        awards.append(result.badge)
    return awards
