"""Pool ledger types."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TypeAlias

from hydra.curve.config import CurveConfig
from hydra.errors import InvalidInput
from hydra.models.types import normalize_address
from hydra.safe_int import S

# Canonical pair identifier: (token_x, token_y), lowercase, token_x < token_y
PairKey: TypeAlias = tuple[str, str]


def pair_key(token_a: str, token_b: str) -> PairKey:
    """Canonical key for a token pair (order independent).

    Raises:
        InvalidInput: If both tokens are the same
    """
    a = normalize_address(token_a)
    b = normalize_address(token_b)
    if a == b:
        raise InvalidInput(f"Pair needs two distinct tokens, got {token_a} twice")
    return (a, b) if a < b else (b, a)


@dataclass(frozen=True)
class PoolState:
    """Immutable snapshot of one pair's ledger.

    Updates never mutate a snapshot; they publish a replacement, so both
    reserves and the share count always change together.
    """

    token_x: str
    token_y: str
    reserve_x: int
    reserve_y: int
    total_shares: int
    active_config: CurveConfig
    active: bool = True

    @property
    def pair(self) -> PairKey:
        return (self.token_x, self.token_y)

    def reserves_for(self, token_in: str) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        token_in_norm = normalize_address(token_in)
        if token_in_norm == self.token_x:
            return self.reserve_x, self.reserve_y
        elif token_in_norm == self.token_y:
            return self.reserve_y, self.reserve_x
        else:
            raise InvalidInput(f"Token {token_in} not in pool")

    def token_out_for(self, token_in: str) -> str:
        """Get the output token for a given input token."""
        token_in_norm = normalize_address(token_in)
        if token_in_norm == self.token_x:
            return self.token_y
        elif token_in_norm == self.token_y:
            return self.token_x
        else:
            raise InvalidInput(f"Token {token_in} not in pool")

    def with_swap(self, token_in: str, amount_in: int, amount_out: int) -> PoolState:
        """Snapshot after amount_in enters and amount_out leaves."""
        if normalize_address(token_in) == self.token_x:
            return replace(
                self,
                reserve_x=(S(self.reserve_x) + amount_in).value,
                reserve_y=(S(self.reserve_y) - amount_out).value,
            )
        return replace(
            self,
            reserve_x=(S(self.reserve_x) - amount_out).value,
            reserve_y=(S(self.reserve_y) + amount_in).value,
        )


@dataclass(frozen=True)
class SwapQuote:
    """Quote for a swap against one pool snapshot.

    Carries the reserves it was priced against so the settlement layer
    can reject it if the pool moved in the meantime.

    Attributes:
        pair: Pool the quote is for
        token_in: Input token
        token_out: Output token
        amount_in: Input amount
        price: Curve price of token_in in token_out units, fixed-point
        gross_amount_out: Output before fee
        fee_amount: Fee withheld from the output
        amount_out: Net output paid to the trader
        reserve_in: Input reserve of the snapshot
        reserve_out: Output reserve of the snapshot
    """

    pair: PairKey
    token_in: str
    token_out: str
    amount_in: int
    price: int
    gross_amount_out: int
    fee_amount: int
    amount_out: int
    reserve_in: int
    reserve_out: int
