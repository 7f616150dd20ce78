"""Transaction store HTTP client for fetching a user's categorized transactions"""

import httpx
from pydantic import ValidationError
from typing import List
from insights_gateway.infrastructure.records import TransactionRecord
from insights_gateway.domain.models import Transaction
from insights_gateway.domain.exceptions import TransactionSourceError
from insights_gateway.config import settings


class TransactionClient:
    """Client for the external transaction persistence service"""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = base_url or settings.transactions_api_base
        self.timeout = timeout or settings.http_timeout_seconds

    async def get_transactions(self, user_id: str) -> List[Transaction]:
        """
        Fetch the complete transaction set for a user.

        Records are normalized to canonical transactions at this boundary.

        Raises:
            TransactionSourceError: On timeout, HTTP errors, or invalid response
        """
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.get(
                    f"{self.base_url}/transactions",
                    params={"user_id": user_id},
                )
                response.raise_for_status()
                data = response.json()

                return [
                    TransactionRecord.model_validate(txn).to_domain()
                    for txn in data.get("transactions", [])
                ]

            except httpx.TimeoutException as e:
                raise TransactionSourceError(f"Transaction store timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise TransactionSourceError(f"Transaction store error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise TransactionSourceError(f"Transaction store unreachable: {e}") from e
            except (ValidationError, ValueError, TypeError, AttributeError) as e:
                raise TransactionSourceError(f"Invalid transaction data from store: {e}") from e
