"""
Summary service for presenting a split's settlement.
"""
from decimal import Decimal
from typing import Any, Dict, Sequence
from app.core.currency import format_amount
from app.models.split import Split
from app.services.settlement_service import (
    compute_balances, compute_fair_share, round_currency, to_decimal
)


def build_settlement_data(
    contributors: Sequence,
    transfers: Sequence,
    currency: str
) -> Dict[str, Any]:
    """
    Collect totals, rounded balances and transfers for display.
    `transfers` may be engine results or stored settlement rows.
    """
    total = sum((to_decimal(c.amount_paid) for c in contributors), Decimal(0))
    return {
        "currency": currency,
        "total_paid": round_currency(total),
        "fair_share": round_currency(compute_fair_share(contributors)),
        "participant_count": len(contributors),
        "balances": [
            {"name": b.name, "net": round_currency(b.net)}
            for b in compute_balances(contributors)
        ],
        "transfers": [
            {"from_name": t.from_name, "to_name": t.to_name, "amount": t.amount}
            for t in transfers
        ],
    }


def build_summary(split: Split) -> str:
    """Render a plain-text summary of a split, suitable for sharing."""
    data = build_settlement_data(split.contributors, split.settlements, split.currency)
    currency = split.currency

    summary_lines = [split.name]
    summary_lines.append(f"Total paid: {format_amount(data['total_paid'], currency)}")
    summary_lines.append(f"Participants: {data['participant_count']}")
    summary_lines.append(f"Fair share: {format_amount(data['fair_share'], currency)}")

    if data["balances"]:
        summary_lines.append("\nNet balances:")
        for balance in data["balances"]:
            summary_lines.append(f"  {balance['name']}: {balance['net']:+.2f}")

    summary_lines.append("\nPayments:")
    if data["transfers"]:
        for transfer in data["transfers"]:
            summary_lines.append(
                f"  {transfer['from_name']} -> {transfer['to_name']}: "
                f"{format_amount(transfer['amount'], currency)}"
            )
    else:
        summary_lines.append("  No payments needed")

    return "\n".join(summary_lines)
