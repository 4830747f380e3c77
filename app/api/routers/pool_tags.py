from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Header, HTTPException

from app.api.deps import get_default_graph_api_key, get_list_pool_tags_use_case
from app.api.schemas.pool_tags import PoolTagResponse, SupportedNetworksResponse
from app.application.dto.pool_tags import ListPoolTagsInput
from app.application.use_cases.list_pool_tags import ListPoolTagsUseCase
from app.domain.exceptions import PaginationLimitExceededError, UnsupportedNetworkError
from app.infrastructure.clients.univ3_subgraph_client import SubgraphError, supported_network_ids

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/v1/networks", response_model=SupportedNetworksResponse)
def list_supported_networks():
    return SupportedNetworksResponse(network_ids=list(supported_network_ids()))


@router.get(
    "/v1/networks/{network_id}/pool-tags",
    response_model=list[PoolTagResponse],
    response_model_by_alias=True,
)
def list_pool_tags(
    network_id: str,
    x_graph_api_key: str | None = Header(default=None),
    default_api_key: str = Depends(get_default_graph_api_key),
    use_case: ListPoolTagsUseCase = Depends(get_list_pool_tags_use_case),
):
    api_key = x_graph_api_key or default_api_key
    if not api_key:
        raise HTTPException(status_code=400, detail="X-Graph-Api-Key header or GRAPH_API_KEY is required.")

    try:
        tags = use_case.execute(ListPoolTagsInput(network_id=network_id, api_key=api_key))
    except UnsupportedNetworkError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except (SubgraphError, PaginationLimitExceededError) as exc:
        logger.warning(
            "pool_tags_router: upstream_failed network_id=%s error=%s detail=%s",
            network_id,
            type(exc).__name__,
            exc,
        )
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return [PoolTagResponse.model_validate(tag.as_record()) for tag in tags]
