"""SQLAlchemy ORM models for stored insight report snapshots"""

import uuid
from sqlalchemy import Column, Date, DateTime, Float, Integer, JSON, Text, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class InsightReport(Base):
    """Snapshot of a generated behavioral insights report"""

    __tablename__ = "insight_report"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    period_start = Column(Date, nullable=False)
    period_end = Column(Date, nullable=False)
    transaction_count = Column(Integer, nullable=False)
    total_income = Column(Float, nullable=False)
    total_spend = Column(Float, nullable=False)
    savings_rate = Column(Float, nullable=False)
    recurring_payments_count = Column(Integer, nullable=False)
    insights = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
