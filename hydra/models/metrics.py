"""Pydantic model for market telemetry consumed by the adaptive selector.

The telemetry collaborator sends camelCase JSON; snake_case names are
accepted too.
"""

from pydantic import BaseModel, ConfigDict, Field

from hydra.models.types import Uint256

SECONDS_PER_DAY = 86_400


class MarketMetrics(BaseModel):
    """Read-only market snapshot for one token."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    market_cap: Uint256 = Field(alias="marketCap", description="Market cap in quote units.")
    volume_24h: Uint256 = Field(alias="volume24h", description="Trailing 24h volume in quote units.")
    holder_count: Uint256 = Field(alias="holderCount", description="Number of distinct holders.")
    age_seconds: Uint256 = Field(alias="ageSeconds", description="Seconds since token launch.")

    @property
    def age_days(self) -> int:
        """Whole days since launch."""
        return self.age_seconds // SECONDS_PER_DAY
