"""GET /v1/categories - Category taxonomy and spending buckets"""

from fastapi import APIRouter, Depends

from insights_gateway.api.v1.schemas import CategoriesResponse, PrimaryCategorySchema
from insights_gateway.api.dependencies import get_taxonomy
from insights_gateway.domain.taxonomy import CategoryTaxonomy

router = APIRouter()


@router.get("/categories", response_model=CategoriesResponse)
def list_categories(taxonomy: CategoryTaxonomy = Depends(get_taxonomy)):
    """List known categories with the spending bucket each primary falls into"""
    categories = [
        PrimaryCategorySchema(
            primary_category=primary,
            spending_bucket=taxonomy.bucket_for(primary),
            detailed_categories=detailed,
        )
        for primary, detailed in taxonomy.detailed_by_primary().items()
    ]

    return CategoriesResponse(
        restricted=taxonomy.pairs is not None,
        fixed=sorted(taxonomy.fixed),
        discretionary=sorted(taxonomy.discretionary),
        categories=categories,
    )
