"""Gene registry endpoint."""

from fastapi import APIRouter

from backend.models import TraitData
from garden.genetics.registry import GENE_TRAITS


def setup_router() -> APIRouter:
    router = APIRouter(prefix="/api/traits", tags=["traits"])

    @router.get("", response_model=list[TraitData])
    async def list_traits():
        """Describe every registered gene."""
        traits = []
        for key, trait in GENE_TRAITS.items():
            if trait.is_qualitative:
                details = {
                    "alleles": {
                        symbol: allele.to_record() for symbol, allele in trait.alleles.items()
                    },
                    "blends": {pair: blend.to_record() for pair, blend in trait.blends.items()},
                }
            else:
                details = {"min": trait.min_value, "max": trait.max_value}
            traits.append(
                TraitData(
                    key=key,
                    name=trait.name,
                    kind=trait.kind.value,
                    default=trait.default_value,
                    details=details,
                )
            )
        return traits

    return router
