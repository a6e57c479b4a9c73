"""Tokenization context consumed by the valuation engine."""

from typing import Dict, Any, Optional
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class TokenizationContext:
    """Tokenization/DeFi facts that may accompany a valuation.

    Only ever adds explanatory text; the estimate never depends on it.
    """
    tokenized: bool
    chain: Optional[str] = None
    is_collateral: bool = False
    lending_platform: Optional[str] = None
    collateral_value: float = 0.0
    borrowed_amount: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
