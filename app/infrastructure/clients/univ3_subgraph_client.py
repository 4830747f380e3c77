from __future__ import annotations

from dataclasses import dataclass
import logging
from types import MappingProxyType
from urllib.parse import quote

import httpx

from app.domain.entities.pool_tag import RawPool, RawPoolToken
from app.domain.exceptions import UnsupportedNetworkError
from app.domain.services.pool_tags import POOLS_PAGE_SIZE


logger = logging.getLogger(__name__)


API_KEY_PLACEHOLDER = "[api-key]"
GRAPH_GATEWAY_BASE = "https://gateway.thegraph.com/api"

SUBGRAPH_URLS = MappingProxyType(
    {
        network_id: f"{GRAPH_GATEWAY_BASE}/{API_KEY_PLACEHOLDER}/subgraphs/id/{subgraph_id}"
        for network_id, subgraph_id in (
            ("1", "5zvR82QoaXYFyDEKLZ9t6v9adgnptxYpKpSbxtgVENFV"),
            ("10", "Cghf4LfVqPiFw6fp6Y5X5Ubc8UpmUhSfJL82zwiBFLaj"),
            ("56", "F85MNzUGYqgSHSHRGgeVMNsdnW1KtZSVgFULumXRZTw2"),
            ("137", "3hCPRGf4z88VC5rsBKU5AA9FBBq5nF3jbKJG7VZCbhjm"),
            ("8453", "43Hwfi3dJSoGpyas9VwNoDAv55yjgGrPpNSmbQZArzMG"),
            ("42161", "FbCGRftH4a3yZugY7TnbYgPJVEv2LvMT6oF1fxPe9aJM"),
            ("42220", "ESdrTJ3twMwWVoQ1hUE2u7PugEHX3QkenudD6aXCkDQ4"),
            ("43114", "GVH9h9KZ9CqheUEL93qMbq7QwgoBu32QXQDPR6bev4Eo"),
        )
    }
)

POOLS_PAGE_QUERY = """
query PoolsPage($lastTimestamp: BigInt!) {
  pools(
    first: %d,
    orderBy: createdAtTimestamp,
    orderDirection: asc,
    where: { createdAtTimestamp_gt: $lastTimestamp }
  ) {
    id
    createdAtTimestamp
    token0 { id name symbol }
    token1 { id name symbol }
  }
}
""" % POOLS_PAGE_SIZE


class SubgraphError(RuntimeError):
    pass


class SubgraphHttpError(SubgraphError):
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP error! status: {status_code}")


class SubgraphGraphQLError(SubgraphError):
    def __init__(self):
        super().__init__("GraphQL errors occurred")


class SubgraphNoPoolsDataError(SubgraphError):
    def __init__(self):
        super().__init__("No pools data found")


class SubgraphUnknownError(SubgraphError):
    pass


def supported_network_ids() -> tuple[str, ...]:
    return tuple(SUBGRAPH_URLS)


def resolve_subgraph_url(network_id: str, api_key: str) -> str:
    template = SUBGRAPH_URLS.get(network_id) if network_id.isdigit() else None
    if template is None:
        raise UnsupportedNetworkError(network_id, supported_network_ids())
    return template.replace(API_KEY_PLACEHOLDER, quote(api_key, safe=""))


@dataclass(frozen=True)
class Univ3SubgraphClientSettings:
    timeout_seconds: float


class Univ3SubgraphClient:
    def __init__(
        self,
        settings: Univ3SubgraphClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    def resolve_endpoint(self, *, network_id: str, api_key: str) -> str:
        return resolve_subgraph_url(network_id, api_key)

    def fetch_pools_page(self, *, endpoint: str, cursor: int) -> list[RawPool]:
        payload = self._post_graphql(
            url=endpoint,
            query=POOLS_PAGE_QUERY,
            variables={"lastTimestamp": str(cursor)},
        )

        data = payload.get("data")
        rows = data.get("pools") if isinstance(data, dict) else None
        if not isinstance(rows, list):
            raise SubgraphNoPoolsDataError()

        try:
            pools = [_map_row_to_raw_pool(row) for row in rows]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise SubgraphUnknownError(
                f"Unknown error while reading pools page: {type(exc).__name__}"
            ) from exc

        logger.debug(
            "univ3_subgraph_client: fetched_pools_page cursor=%s fetched=%s",
            cursor,
            len(pools),
        )
        return pools

    def _post_graphql(self, *, url: str, query: str, variables: dict) -> dict:
        # The endpoint embeds the API key; keep it out of messages and logs.
        try:
            with httpx.Client(timeout=self._settings.timeout_seconds, transport=self._transport) as client:
                response = client.post(
                    url,
                    json={"query": query, "variables": variables},
                )
                if not response.is_success:
                    raise SubgraphHttpError(response.status_code)
                payload = response.json()
        except SubgraphError:
            raise
        except (httpx.HTTPError, ValueError) as exc:
            raise SubgraphUnknownError(
                f"Unknown error while querying subgraph: {type(exc).__name__}"
            ) from exc

        if not isinstance(payload, dict):
            raise SubgraphUnknownError("Unknown error while querying subgraph: unexpected payload")

        errors = payload.get("errors") or []
        if not isinstance(errors, list):
            raise SubgraphUnknownError("Unknown error while querying subgraph: unexpected errors payload")
        if errors:
            for err in errors:
                message = err.get("message", err) if isinstance(err, dict) else err
                logger.error("univ3_subgraph_client: graphql_error message=%s", message)
            raise SubgraphGraphQLError()

        return payload


def _map_row_to_raw_pool(row: dict) -> RawPool:
    return RawPool(
        id=row["id"],
        created_at_timestamp=int(row["createdAtTimestamp"]),
        token0=_map_row_to_token(row["token0"]),
        token1=_map_row_to_token(row["token1"]),
    )


def _map_row_to_token(row: dict) -> RawPoolToken:
    return RawPoolToken(
        id=row.get("id") or "",
        name=row.get("name") or "",
        symbol=row.get("symbol") or "",
    )
