"""Shared type definitions for Hydra models."""

import re
from typing import Annotated

from pydantic import Field

from hydra.constants import UINT256_MAX

# Token address (40 hex chars after 0x prefix)
Address = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{40}$")]

# 256-bit unsigned integer carried as a Python int
Uint256 = Annotated[
    int,
    Field(ge=0, le=UINT256_MAX, description="256-bit unsigned integer"),
]

_ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")


def is_valid_address(address: str) -> bool:
    """Check that address is 0x followed by 40 hex chars."""
    return bool(_ADDRESS_RE.match(address))


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize a token address to lowercase.

    Args:
        address: A token address
        validate: If True, raises ValueError for malformed addresses.

    Returns:
        Lowercase address
    """
    if validate and not is_valid_address(address):
        raise ValueError(f"Invalid address: {address} (must be 0x + 40 hex chars)")
    return address.lower()
