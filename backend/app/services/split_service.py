"""
Split service for split and contributor business logic.

All contributor validation happens here, before the settlement engine is
invoked. Every change to a split's contributor list recalculates and stores
its settlements.
"""
from sqlalchemy import func
from sqlalchemy.orm import Session
from decimal import Decimal, InvalidOperation
from typing import List, Optional
import logging
from app.core.config import settings
from app.core.currency import is_supported_currency
from app.models.split import Split, SplitContributor, SplitSettlement
from app.services.settlement_service import compute_settlements, round_currency, to_decimal

logger = logging.getLogger(__name__)


def normalize_currency(currency: Optional[str]) -> str:
    """Upper-case a currency code, falling back to the default currency."""
    code = (currency or settings.DEFAULT_CURRENCY).strip().upper()
    if not is_supported_currency(code):
        raise ValueError(f"Unsupported currency: {code}")
    return code


def validate_amount(amount) -> Decimal:
    """Parse an amount paid; it must be a finite, non-negative number."""
    if amount is None or (isinstance(amount, str) and not amount.strip()):
        raise ValueError("Amount is required")
    try:
        value = to_decimal(amount)
    except (InvalidOperation, ValueError):
        raise ValueError("Amount must be a number")
    if not value.is_finite():
        raise ValueError("Amount must be a number")
    if value < 0:
        raise ValueError("Amount cannot be negative")
    return value


def validate_contributor_name(name: Optional[str], existing: List[str]) -> str:
    """Trim a contributor name and check it is unique (case-insensitive)."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValueError("Name is required")
    if any(other.lower() == cleaned.lower() for other in existing):
        raise ValueError("A person with this name already exists")
    return cleaned


def _check_split_name(name: Optional[str], db: Session, exclude_id: int = None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValueError("Please enter a split name")

    query = db.query(Split).filter(func.lower(Split.name) == cleaned.lower())
    if exclude_id is not None:
        query = query.filter(Split.id != exclude_id)
    if query.first():
        raise ValueError("A split with this name already exists")
    return cleaned


def list_splits(db: Session) -> List[Split]:
    """List all splits, oldest first."""
    return db.query(Split).order_by(Split.created_at, Split.id).all()


def get_split(split_id: int, db: Session) -> Optional[Split]:
    """Get a split by ID."""
    return db.query(Split).filter(Split.id == split_id).first()


def create_split(name: str, currency: Optional[str], db: Session) -> Split:
    """Create an empty split."""
    split = Split(
        name=_check_split_name(name, db),
        currency=normalize_currency(currency)
    )
    db.add(split)
    db.commit()
    db.refresh(split)

    logger.info(f"Created split {split.id} '{split.name}' ({split.currency})")
    return split


def update_split(
    split: Split,
    db: Session,
    name: Optional[str] = None,
    currency: Optional[str] = None
) -> Split:
    """Rename a split and/or change its display currency."""
    if name is not None:
        # A blank name falls back to the default, which must be unique as well
        new_name = name if name.strip() else settings.DEFAULT_SPLIT_NAME
        split.name = _check_split_name(new_name, db, exclude_id=split.id)
    if currency is not None:
        split.currency = normalize_currency(currency)

    db.commit()
    db.refresh(split)
    return split


def delete_split(split: Split, db: Session):
    """Delete a split with its contributors and settlements."""
    logger.info(f"Deleting split {split.id} '{split.name}'")
    db.delete(split)
    db.commit()


def recalculate_settlements(split: Split, db: Session) -> List[SplitSettlement]:
    """
    Run the settlement engine over the split's contributors (in entry order)
    and replace the stored settlements with the result.
    """
    transfers = compute_settlements(list(split.contributors))

    split.settlements.clear()
    db.flush()
    for position, transfer in enumerate(transfers):
        split.settlements.append(SplitSettlement(
            from_name=transfer.from_name,
            to_name=transfer.to_name,
            amount=transfer.amount,
            position=position
        ))

    logger.debug(f"Split {split.id}: stored {len(transfers)} settlements")
    return split.settlements


def add_contributor(split: Split, name: str, amount_paid, db: Session) -> SplitContributor:
    """Add a contributor to the end of the split and recalculate settlements."""
    cleaned = validate_contributor_name(name, [c.name for c in split.contributors])
    # Stored with two decimals, so settle on the stored value
    amount = round_currency(validate_amount(amount_paid))

    next_position = max((c.position for c in split.contributors), default=-1) + 1
    contributor = SplitContributor(
        name=cleaned,
        amount_paid=amount,
        position=next_position
    )
    split.contributors.append(contributor)
    db.flush()

    recalculate_settlements(split, db)
    db.commit()
    db.refresh(contributor)

    logger.info(f"Split {split.id}: added contributor '{cleaned}' ({amount})")
    return contributor


def get_contributor(split: Split, contributor_id: int) -> Optional[SplitContributor]:
    """Find a contributor of this split by ID."""
    for contributor in split.contributors:
        if contributor.id == contributor_id:
            return contributor
    return None


def update_contributor(
    split: Split,
    contributor: SplitContributor,
    db: Session,
    name: Optional[str] = None,
    amount_paid=None
) -> SplitContributor:
    """Edit a contributor's name and/or amount and recalculate settlements."""
    if name is not None:
        others = [c.name for c in split.contributors if c.id != contributor.id]
        contributor.name = validate_contributor_name(name, others)
    if amount_paid is not None:
        contributor.amount_paid = round_currency(validate_amount(amount_paid))
    db.flush()

    recalculate_settlements(split, db)
    db.commit()
    db.refresh(contributor)
    return contributor


def remove_contributor(split: Split, contributor: SplitContributor, db: Session):
    """Remove a contributor and recalculate settlements."""
    name = contributor.name
    split.contributors.remove(contributor)
    db.flush()

    recalculate_settlements(split, db)
    db.commit()

    logger.info(f"Split {split.id}: removed contributor '{name}'")
