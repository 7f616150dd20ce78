"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import date
from typing import List, Optional

from insights_gateway.domain.models import Frequency
from insights_gateway.infrastructure.records import TransactionRecord


class AnalyzeRequest(BaseModel):
    """Request body for POST /v1/insights/analyze"""

    transactions: List[TransactionRecord]


class DomainSchema(BaseModel):
    """Base for responses built straight from domain dataclasses"""

    model_config = ConfigDict(from_attributes=True)


class PeriodSchema(DomainSchema):
    start: date
    end: date


class SummarySchema(DomainSchema):
    total_income: float
    total_spend: float
    savings_rate: float
    recurring_payments_count: int
    avg_monthly_income: float
    avg_monthly_spend: float


class DetailedCategorySchema(DomainSchema):
    detailed_category: str
    amount: float
    transaction_count: int


class CategoryBreakdownSchema(DomainSchema):
    primary_category: str
    total_amount: float
    percentage: float
    detailed_breakdown: List[DetailedCategorySchema]


class MonthlyTrendSchema(DomainSchema):
    month: str
    income: float
    spend: float
    net: float


class RecurringPaymentSchema(DomainSchema):
    merchant: str
    amount: float
    frequency: Frequency
    category: str


class SpendingPatternsSchema(DomainSchema):
    fixed: float
    variable: float
    discretionary: float


class ForecastPointSchema(DomainSchema):
    month: str
    expected_spend: float
    confidence: str


class BehavioralInsightsResponse(DomainSchema):
    """Response for /v1/insights and /v1/insights/analyze"""

    period: PeriodSchema
    summary: SummarySchema
    category_breakdown: List[CategoryBreakdownSchema]
    monthly_trends: List[MonthlyTrendSchema]
    recurring_payments: List[RecurringPaymentSchema]
    spending_patterns: SpendingPatternsSchema
    forecast: Optional[List[ForecastPointSchema]] = None
    insights: List[str]


class HistoryItem(BaseModel):
    """Single stored report snapshot"""

    report_id: str
    period_start: date
    period_end: date
    total_income: float
    total_spend: float
    savings_rate: float
    recurring_payments_count: int
    insights: List[str]
    created_at: str


class HistoryResponse(BaseModel):
    """Response for GET /v1/insights/history"""

    user_id: str
    reports: List[HistoryItem]


class PrimaryCategorySchema(BaseModel):
    primary_category: str
    spending_bucket: str
    detailed_categories: List[str]


class CategoriesResponse(BaseModel):
    """Response for GET /v1/categories"""

    restricted: bool = Field(..., description="False when any category labels are accepted")
    fixed: List[str]
    discretionary: List[str]
    categories: List[PrimaryCategorySchema]
