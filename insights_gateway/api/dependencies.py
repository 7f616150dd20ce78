"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from insights_gateway.domain.taxonomy import CategoryTaxonomy
from insights_gateway.infrastructure.clients.transactions import TransactionClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_transaction_client() -> TransactionClient:
    """Provide transaction store client instance"""
    return TransactionClient()


def get_taxonomy(request: Request) -> CategoryTaxonomy:
    """Category taxonomy loaded once at app creation"""
    return request.app.state.taxonomy
