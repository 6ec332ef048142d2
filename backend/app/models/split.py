"""
Split models: a named expense pool, its contributors and derived settlements.
"""
from sqlalchemy import Column, String, Numeric, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Split(BaseModel):
    """Split model representing a shared expense pool."""
    __tablename__ = "splits"
    
    name = Column(String(200), nullable=False, index=True)
    currency = Column(String(3), nullable=False, default="USD")  # Display currency, all amounts share it
    
    # Relationships
    contributors = relationship(
        "SplitContributor",
        back_populates="split",
        cascade="all, delete-orphan",
        order_by="SplitContributor.position"
    )
    settlements = relationship(
        "SplitSettlement",
        back_populates="split",
        cascade="all, delete-orphan",
        order_by="SplitSettlement.position"
    )


class SplitContributor(BaseModel):
    """A person in a split and the total amount they paid."""
    __tablename__ = "split_contributors"
    
    split_id = Column(Integer, ForeignKey("splits.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    amount_paid = Column(Numeric(15, 2), nullable=False)
    position = Column(Integer, nullable=False, default=0)  # Entry order, settlement tie-breaks depend on it
    
    # Relationships
    split = relationship("Split", back_populates="contributors")


class SplitSettlement(BaseModel):
    """Stored transfer derived from the split's contributors."""
    __tablename__ = "split_settlements"
    
    split_id = Column(Integer, ForeignKey("splits.id"), nullable=False, index=True)
    from_name = Column(String(100), nullable=False)
    to_name = Column(String(100), nullable=False)
    amount = Column(Numeric(15, 2), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    
    # Relationships
    split = relationship("Split", back_populates="settlements")
