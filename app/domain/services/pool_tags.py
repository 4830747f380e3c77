from __future__ import annotations

import logging

from app.domain.entities.pool_tag import InvalidField, PoolTag, RawPool
from app.domain.services.pool_tag_rules import text_rejection_reason, truncate_text


logger = logging.getLogger(__name__)


POOLS_PAGE_SIZE = 1000
PROJECT_NAME = "Uniswap v3"
UI_WEBSITE_LINK = "https://uniswap.org"


def find_invalid_fields(pool: RawPool) -> list[InvalidField]:
    invalid: list[InvalidField] = []
    for side, token in (("token0", pool.token0), ("token1", pool.token1)):
        for field_name, value in (("name", token.name), ("symbol", token.symbol)):
            reason = text_rejection_reason(value)
            if reason is not None:
                invalid.append(
                    InvalidField(side=side, field=field_name, reason=reason, value=value)
                )
    return invalid


def build_pool_tag(network_id: str, pool: RawPool) -> PoolTag:
    token0 = pool.token0
    token1 = pool.token1
    pair = truncate_text(f"{token0.symbol}/{token1.symbol}")
    return PoolTag(
        contract_address=f"eip155:{network_id}:{pool.id}",
        public_name_tag=f"{pair} Pool",
        project_name=PROJECT_NAME,
        ui_website_link=UI_WEBSITE_LINK,
        public_note=(
            f"The liquidity pool contract on Uniswap v3 for the "
            f"{token0.name} ({token0.symbol}) / {token1.name} ({token1.symbol}) pair."
        ),
    )


def transform_pools(network_id: str, pools: list[RawPool]) -> list[PoolTag]:
    tags: list[PoolTag] = []
    for pool in pools:
        invalid = find_invalid_fields(pool)
        if invalid:
            _log_rejected_pool(network_id, pool, invalid)
            continue
        tags.append(build_pool_tag(network_id, pool))
    return tags


def _log_rejected_pool(network_id: str, pool: RawPool, invalid: list[InvalidField]) -> None:
    sides = {item.side for item in invalid}
    side = "both" if len(sides) > 1 else sides.pop()
    logger.warning(
        "pool_tags: rejected_pool pool=%s network_id=%s side=%s invalid=%s",
        pool.id,
        network_id,
        side,
        "; ".join(f"{item.side}.{item.field}={item.value!r} ({item.reason})" for item in invalid),
    )
