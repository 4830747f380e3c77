from __future__ import annotations

from typing import Protocol

from app.domain.entities.pool_tag import RawPool


class PoolSourcePort(Protocol):
    def resolve_endpoint(self, *, network_id: str, api_key: str) -> str:
        ...

    def fetch_pools_page(self, *, endpoint: str, cursor: int) -> list[RawPool]:
        ...
