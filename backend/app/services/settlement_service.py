"""
Settlement engine for equalizing contributions within a split.

Pure functions only: no database access, no shared state. Callers pass in the
contributor list and store the returned transfers wherever they need them.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence, Union
import logging

logger = logging.getLogger(__name__)

# One cent. Every comparison in the matching loop uses this tolerance.
EPSILON = Decimal("0.01")
CENT = Decimal("0.01")

Number = Union[Decimal, float, int, str]


@dataclass(frozen=True)
class Contributor:
    """A person and the total they paid into the split."""
    name: str
    amount_paid: Number


@dataclass(frozen=True)
class Balance:
    """A contributor's position relative to the fair share (positive = owed money)."""
    name: str
    net: Decimal


@dataclass(frozen=True)
class Transfer:
    """Represents a single payment from a debtor to a creditor."""
    from_name: str
    to_name: str
    amount: Decimal


@dataclass
class _Party:
    """Working copy used during matching; `remaining` is mutated in place."""
    name: str
    remaining: Decimal


def to_decimal(value: Number) -> Decimal:
    """Convert an amount to Decimal, going through str for floats."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_currency(value: Decimal) -> Decimal:
    """Round to cents, half-up."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def compute_fair_share(contributors: Sequence) -> Decimal:
    """
    Total paid divided by the number of contributors.
    Returns 0 for an empty list.
    """
    if not contributors:
        return Decimal(0)
    total = sum((to_decimal(c.amount_paid) for c in contributors), Decimal(0))
    return total / len(contributors)


def compute_balances(contributors: Sequence) -> List[Balance]:
    """Net position of every contributor, in input order. Nets are not rounded."""
    fair_share = compute_fair_share(contributors)
    return [
        Balance(name=c.name, net=to_decimal(c.amount_paid) - fair_share)
        for c in contributors
    ]


def minimize_transfers(balances: Sequence[Balance]) -> List[Transfer]:
    """
    Minimize the number of transfers needed to settle debts.
    Uses a greedy algorithm: the largest remaining debtor always pays the
    largest remaining creditor.
    """
    # Separate creditors (positive balance) and debtors (negative balance)
    creditors = [_Party(b.name, b.net) for b in balances if b.net > EPSILON]
    debtors = [_Party(b.name, -b.net) for b in balances if b.net < -EPSILON]

    # Sort in descending order; sort is stable so ties keep input order
    creditors.sort(key=lambda p: p.remaining, reverse=True)
    debtors.sort(key=lambda p: p.remaining, reverse=True)

    transfers = []
    cred_idx = 0
    debt_idx = 0

    while cred_idx < len(creditors) and debt_idx < len(debtors):
        creditor = creditors[cred_idx]
        debtor = debtors[debt_idx]

        # Transfer the minimum of what's owed and what's needed
        transfer_amount = min(debtor.remaining, creditor.remaining)
        if transfer_amount > EPSILON:
            transfers.append(Transfer(debtor.name, creditor.name, round_currency(transfer_amount)))

        debtor.remaining -= transfer_amount
        creditor.remaining -= transfer_amount

        if debtor.remaining < EPSILON:
            debt_idx += 1
        if creditor.remaining < EPSILON:
            cred_idx += 1

    return transfers


def compute_settlements(contributors: Sequence) -> List[Transfer]:
    """
    Compute the payments that bring every contributor to the fair share.

    Fewer than two contributors means there is nothing to settle and an empty
    list is returned. Input records are never modified.
    """
    if len(contributors) < 2:
        return []

    transfers = minimize_transfers(compute_balances(contributors))
    logger.debug(f"Settled {len(contributors)} contributors with {len(transfers)} transfers")
    return transfers
