"""Canonical player models shared across ingestion, roster and ranking layers."""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict

from rostercap.valuation import classify_value, compute_value_pct


class PlayerRecord(BaseModel):
    """Normalized player payload with real salary and ACE model estimate."""

    name: str = Field(..., min_length=1)
    team: str = ""
    position: str = ""
    salary: float = Field(..., ge=0.0)
    ace: float = Field(..., ge=0.0)

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def value_pct(self) -> float:
        return compute_value_pct(self.salary, self.ace)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def value_band(self) -> str:
        return classify_value(self.value_pct)
