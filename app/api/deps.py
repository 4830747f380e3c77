from __future__ import annotations

from functools import lru_cache

from app.application.use_cases.list_pool_tags import ListPoolTagsUseCase
from app.infrastructure.clients.univ3_subgraph_client import (
    Univ3SubgraphClient,
    Univ3SubgraphClientSettings,
)
from app.shared.config import get_settings


@lru_cache(maxsize=1)
def _get_univ3_subgraph_client() -> Univ3SubgraphClient:
    settings = get_settings()
    return Univ3SubgraphClient(
        Univ3SubgraphClientSettings(
            timeout_seconds=settings.graph_request_timeout_seconds,
        )
    )


def get_default_graph_api_key() -> str:
    return get_settings().graph_api_key


def get_list_pool_tags_use_case() -> ListPoolTagsUseCase:
    settings = get_settings()
    return ListPoolTagsUseCase(
        pool_source=_get_univ3_subgraph_client(),
        max_pages=settings.pool_tags_max_pages or None,
    )
