from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class UnsupportedNetworkError(DomainError):
    """Network id is not numeric or has no configured subgraph."""

    def __init__(self, network_id: str, supported: tuple[str, ...]):
        self.network_id = network_id
        self.supported = supported
        super().__init__(
            f"Unsupported network: {network_id!r}. "
            f"Supported networks: {', '.join(supported)}"
        )


class PaginationLimitExceededError(DomainError):
    """Pagination went past the configured page limit."""
