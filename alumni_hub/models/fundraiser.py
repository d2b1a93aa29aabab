"""
Fundraiser and Donation Database Models
"""

from sqlalchemy import Column, String, Integer, Float, Text, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from alumni_hub.models.base import Base, TimestampMixin, new_id


class Fundraiser(Base, TimestampMixin):
    """Fundraising campaigns"""

    __tablename__ = "fundraisers"

    pk = Column("id", Integer, primary_key=True, autoincrement=True)
    id = Column("fundraiser_id", String(64), unique=True, nullable=False, index=True, default=new_id)

    title = Column(String(256), nullable=False)
    description = Column(Text, nullable=False)
    goal = Column(Float, nullable=False)
    raised = Column(Float, nullable=False, default=0)
    donors = Column(Integer, nullable=False, default=0)
    category = Column(String(64), nullable=False, default="General")
    end_date = Column(String(32), nullable=True)
    featured = Column(Boolean, nullable=False, default=False)
    image = Column(String(256), nullable=True)
    created_by = Column(String(64), nullable=False)

    # Status: 'active', 'completed', 'cancelled'
    status = Column(String(32), default="active", nullable=False, index=True)

    donations = relationship(
        "Donation", back_populates="fundraiser", cascade="all, delete-orphan", order_by="Donation.pk"
    )

    def __repr__(self):
        return f"<Fundraiser(id='{self.id}', title='{self.title}', status='{self.status}')>"


class Donation(Base, TimestampMixin):
    """A single (simulated) payment towards a fundraiser"""

    __tablename__ = "donations"

    pk = Column("id", Integer, primary_key=True, autoincrement=True)
    id = Column("donation_id", String(64), unique=True, nullable=False, index=True, default=new_id)

    fundraiser_pk = Column(Integer, ForeignKey("fundraisers.id"), nullable=False, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    amount = Column(Float, nullable=False)
    # 'upi', 'card', 'netbanking'
    payment_method = Column(String(32), nullable=False)
    transaction_id = Column(String(64), nullable=False)
    # 'completed', 'pending', 'failed'
    status = Column(String(32), nullable=False, default="completed")

    fundraiser = relationship("Fundraiser", back_populates="donations")

    @property
    def fundraiser_id(self) -> str:
        return self.fundraiser.id
