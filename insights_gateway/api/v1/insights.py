"""GET /v1/insights and POST /v1/insights/analyze - behavioral insights endpoints"""

import time
import logging
from typing import Optional, Sequence
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from insights_gateway.api.v1.schemas import AnalyzeRequest, BehavioralInsightsResponse
from insights_gateway.api.dependencies import get_request_id, get_taxonomy, get_transaction_client
from insights_gateway.infrastructure.database.session import get_db
from insights_gateway.infrastructure.database.repositories import InsightReportRepository
from insights_gateway.infrastructure.clients.transactions import TransactionClient
from insights_gateway.domain.insights import generate_insights
from insights_gateway.domain.models import BehavioralInsights, Transaction
from insights_gateway.domain.taxonomy import CategoryTaxonomy
from insights_gateway.domain.exceptions import InsufficientDataError, TransactionSourceError
from insights_gateway.infrastructure.observability.metrics import (
    record_insights,
    record_no_data,
    transaction_store_failures_counter,
)
from insights_gateway.infrastructure.observability.logging import log_insights

router = APIRouter()

NO_DATA_DETAIL = "No transactions available for analysis"


def _run_insights(
    transactions: Sequence[Transaction],
    taxonomy: CategoryTaxonomy,
    request_id: str,
    user_id: Optional[str],
    start_time: float,
) -> BehavioralInsights:
    """Run the analytical core and emit metrics/logs for the outcome"""
    try:
        insights = generate_insights(transactions, taxonomy)
    except InsufficientDataError as e:
        record_no_data()
        logging.warning(f"Insufficient data: {e}", extra={"request_id": request_id, "user_id": user_id})
        raise HTTPException(status_code=422, detail=NO_DATA_DETAIL)

    duration_ms = (time.time() - start_time) * 1000
    record_insights(insights)
    log_insights(
        request_id,
        user_id,
        len(transactions),
        insights.summary.recurring_payments_count,
        insights.forecast is not None,
        duration_ms,
    )
    return insights


@router.post("/insights/analyze", response_model=BehavioralInsightsResponse)
def analyze_transactions(
    request_body: AnalyzeRequest,
    request: Request,
    taxonomy: CategoryTaxonomy = Depends(get_taxonomy),
):
    """
    Generate insights for transactions supplied in the request body.

    Stateless: nothing is fetched or persisted.
    """
    start_time = time.time()
    transactions = [record.to_domain() for record in request_body.transactions]
    insights = _run_insights(transactions, taxonomy, get_request_id(request), None, start_time)
    return BehavioralInsightsResponse.model_validate(insights)


@router.get("/insights", response_model=BehavioralInsightsResponse)
async def get_user_insights(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
    taxonomy: CategoryTaxonomy = Depends(get_taxonomy),
    transaction_client: TransactionClient = Depends(get_transaction_client),
):
    """
    Generate insights over a user's stored transactions.

    Flow:
    1. Fetch the full transaction set from the transaction store
    2. Run the analytical core
    3. Persist a report snapshot
    4. Return the report
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        transactions = await transaction_client.get_transactions(user_id)
        insights = _run_insights(transactions, taxonomy, request_id, user_id, start_time)

        InsightReportRepository(db).create_report(
            user_id=user_id,
            transaction_count=len(transactions),
            insights=insights,
        )
        db.commit()

        return BehavioralInsightsResponse.model_validate(insights)

    except HTTPException:
        db.rollback()
        raise

    except TransactionSourceError as e:
        transaction_store_failures_counter.inc()
        db.rollback()
        logging.error(f"Transaction store error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Transaction service unavailable")

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
