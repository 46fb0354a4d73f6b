"""Models for Hydra inputs."""

from hydra.models.metrics import MarketMetrics
from hydra.models.types import Address, Uint256, is_valid_address, normalize_address

__all__ = ["MarketMetrics", "Address", "Uint256", "is_valid_address", "normalize_address"]
