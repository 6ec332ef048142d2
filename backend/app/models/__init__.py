"""Models package - Import all models for SQLAlchemy registration."""
from app.models.split import Split, SplitContributor, SplitSettlement

__all__ = [
    "Split",
    "SplitContributor",
    "SplitSettlement",
]
