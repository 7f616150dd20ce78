"""Data access layer for insight reports"""

from typing import List
from sqlalchemy.orm import Session
from insights_gateway.infrastructure.database.models import InsightReport
from insights_gateway.domain.models import BehavioralInsights


class InsightReportRepository:
    """Repository for insight report snapshots"""

    def __init__(self, db: Session):
        self.db = db

    def create_report(
        self,
        user_id: str,
        transaction_count: int,
        insights: BehavioralInsights,
    ) -> InsightReport:
        """Persist the headline figures of a generated report"""
        summary = insights.summary
        db_report = InsightReport(
            user_id=user_id,
            period_start=insights.period.start,
            period_end=insights.period.end,
            transaction_count=transaction_count,
            total_income=summary.total_income,
            total_spend=summary.total_spend,
            savings_rate=summary.savings_rate,
            recurring_payments_count=summary.recurring_payments_count,
            insights=list(insights.insights),
        )
        self.db.add(db_report)
        self.db.flush()  # Get ID without committing
        return db_report

    def get_reports_by_user(self, user_id: str, limit: int = 10) -> List[InsightReport]:
        """Fetch recent reports for a user"""
        return (
            self.db.query(InsightReport)
            .filter(InsightReport.user_id == user_id)
            .order_by(InsightReport.created_at.desc())
            .limit(limit)
            .all()
        )
