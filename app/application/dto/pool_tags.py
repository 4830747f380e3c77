from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ListPoolTagsInput:
    network_id: str
    api_key: str = field(repr=False)
