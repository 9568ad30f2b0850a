"""Nesting endpoints."""

from fastapi import APIRouter

from panel_nesting.application import NestingService
from panel_nesting.application.config import config_to_nesting_config, config_to_parts
from panel_nesting.web.dependencies import StrategyRegistryDep
from panel_nesting.web.schemas.requests import NestingRequest
from panel_nesting.web.schemas.responses import (
    ErrorResponseSchema,
    NestingResponseSchema,
    NestingResultSchema,
    StrategyListItemSchema,
    StrategyListSchema,
)

router = APIRouter(prefix="/nesting", tags=["nesting"])


@router.post(
    "/optimize",
    response_model=NestingResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
def optimize(
    request: NestingRequest,
    registry: StrategyRegistryDep,
) -> NestingResponseSchema:
    """Nest a cutting list onto stock sheets.

    Args:
        request: Cutting list plus nesting options.
        registry: Injected strategy registry.

    Returns:
        One result per (material type, thickness) group.
    """
    config = config_to_nesting_config(request, fail_on_unplaced=request.fail_on_unplaced)
    service = NestingService(config, registry)
    results = service.optimize(config_to_parts(request.cutting_list))

    return NestingResponseSchema(
        results=[NestingResultSchema.model_validate(r.to_dict()) for r in results],
        sheet_count=sum(r.sheet_count for r in results),
        unplaced_count=sum(len(r.unplaced) for r in results),
    )


@router.get("/strategies", response_model=StrategyListSchema)
async def list_strategies(registry: StrategyRegistryDep) -> StrategyListSchema:
    """List the strategies that can be requested by name."""
    return StrategyListSchema(
        default=registry.default.key,
        strategies=[
            StrategyListItemSchema(
                name=profile.key,
                label=profile.label,
                description=profile.description,
                deterministic=profile.deterministic,
            )
            for profile in registry.profiles()
        ],
        aliases=registry.aliases(),
    )
