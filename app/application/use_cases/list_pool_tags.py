from __future__ import annotations

import logging

from app.application.dto.pool_tags import ListPoolTagsInput
from app.application.ports.pool_source_port import PoolSourcePort
from app.domain.entities.pool_tag import PoolTag
from app.domain.exceptions import PaginationLimitExceededError
from app.domain.services.pool_tags import POOLS_PAGE_SIZE, transform_pools


logger = logging.getLogger(__name__)


class ListPoolTagsUseCase:
    """Pages through every pool of a network and maps the valid ones to tags.

    A full page means there may be more records; the next request starts
    strictly after the ``created_at_timestamp`` of the last pool received.
    Any shorter page ends the pagination.
    """

    def __init__(
        self,
        *,
        pool_source: PoolSourcePort,
        max_pages: int | None = None,
    ):
        self._pool_source = pool_source
        self._max_pages = max_pages

    def execute(self, command: ListPoolTagsInput) -> list[PoolTag]:
        endpoint = self._pool_source.resolve_endpoint(
            network_id=command.network_id,
            api_key=command.api_key,
        )

        cursor = 0
        pages = 0
        fetched = 0
        tags: list[PoolTag] = []
        while True:
            if self._max_pages and pages >= self._max_pages:
                logger.error(
                    "list_pool_tags: page_limit_exceeded network_id=%s max_pages=%s cursor=%s",
                    command.network_id,
                    self._max_pages,
                    cursor,
                )
                raise PaginationLimitExceededError(
                    f"Pagination exceeded {self._max_pages} pages for network {command.network_id}."
                )

            try:
                pools = self._pool_source.fetch_pools_page(endpoint=endpoint, cursor=cursor)
            except Exception as exc:
                logger.error(
                    "list_pool_tags: fetch_failed network_id=%s cursor=%s page=%s error=%s",
                    command.network_id,
                    cursor,
                    pages + 1,
                    type(exc).__name__,
                )
                raise

            pages += 1
            fetched += len(pools)
            tags.extend(transform_pools(command.network_id, pools))
            logger.debug(
                "list_pool_tags: page_done network_id=%s page=%s cursor=%s size=%s",
                command.network_id,
                pages,
                cursor,
                len(pools),
            )

            if len(pools) != POOLS_PAGE_SIZE:
                break
            cursor = int(pools[-1].created_at_timestamp)

        logger.info(
            "list_pool_tags: done network_id=%s pages=%s fetched=%s tags=%s rejected=%s",
            command.network_id,
            pages,
            fetched,
            len(tags),
            fetched - len(tags),
        )
        return tags
