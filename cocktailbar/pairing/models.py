from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

RuleKind = Literal["area", "category"]


class PairingRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: RuleKind
    value: str


class PairingGroup(BaseModel):
    """Spirits/liqueurs sharing the same candidate pairings."""

    model_config = ConfigDict(frozen=True)

    match_keys: frozenset[str]
    options: tuple[PairingRule, ...]
