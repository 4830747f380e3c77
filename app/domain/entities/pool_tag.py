from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawPoolToken:
    id: str
    name: str
    symbol: str


@dataclass(frozen=True)
class RawPool:
    id: str
    created_at_timestamp: int
    token0: RawPoolToken
    token1: RawPoolToken


@dataclass(frozen=True)
class InvalidField:
    side: str
    field: str
    reason: str
    value: str | None


@dataclass(frozen=True)
class PoolTag:
    contract_address: str
    public_name_tag: str
    project_name: str
    ui_website_link: str
    public_note: str

    def as_record(self) -> dict[str, str]:
        return {
            "Contract Address": self.contract_address,
            "Public Name Tag": self.public_name_tag,
            "Project Name": self.project_name,
            "UI/Website Link": self.ui_website_link,
            "Public Note": self.public_note,
        }
