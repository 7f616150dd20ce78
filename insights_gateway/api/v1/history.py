"""GET /v1/insights/history - Fetch user's stored insight reports"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from insights_gateway.api.v1.schemas import HistoryResponse, HistoryItem
from insights_gateway.config import settings
from insights_gateway.infrastructure.database.session import get_db
from insights_gateway.infrastructure.database.repositories import InsightReportRepository

router = APIRouter()


@router.get("/insights/history", response_model=HistoryResponse)
def get_insights_history(
    user_id: str = Query(..., description="User identifier"),
    db: Session = Depends(get_db),
):
    """
    Retrieve recent insight report snapshots for a user, newest first.
    """
    report_repo = InsightReportRepository(db)
    reports = report_repo.get_reports_by_user(user_id, limit=settings.history_limit)

    history_items = [
        HistoryItem(
            report_id=str(r.id),
            period_start=r.period_start,
            period_end=r.period_end,
            total_income=r.total_income,
            total_spend=r.total_spend,
            savings_rate=r.savings_rate,
            recurring_payments_count=r.recurring_payments_count,
            insights=r.insights,
            created_at=r.created_at.isoformat(),
        )
        for r in reports
    ]

    return HistoryResponse(user_id=user_id, reports=history_items)
