"""Human-readable reasoning for valuation factors."""

from typing import List, Optional
from .scorer import FactorSet
from .context import TokenizationContext


class Explainer:
    """Renders a FactorSet into an ordered rationale string."""

    SEPARATOR = "; "
    FALLBACK = "Standard domain name"
    INVALID_FORMAT = "Invalid domain format"

    def factor_clauses(self, factors: FactorSet) -> List[str]:
        reasons = []

        # Length tier first; 6-15 chars carry no clause
        if factors.length <= 3:
            reasons.append("Very short domain (premium)")
        elif factors.length <= 5:
            reasons.append("Short and memorable")
        elif factors.length > 15:
            reasons.append("Long domain name")

        if factors.brandable:
            reasons.append("Brandable name")

        if factors.pronounceable:
            reasons.append("Easy to pronounce")

        if factors.word_score > 2:
            reasons.append("Contains valuable keywords")

        if factors.has_digits:
            reasons.append("Contains numbers (reduces value)")

        if factors.has_hyphen:
            reasons.append("Contains hyphens (reduces value)")

        return reasons

    def tokenization_clauses(self, context: Optional[TokenizationContext]) -> List[str]:
        if context is None or not context.tokenized:
            return []

        reasons = []
        if context.chain:
            reasons.append(f"Tokenized on {context.chain}")
        else:
            reasons.append("Tokenized")

        if context.is_collateral:
            platform = context.lending_platform or "a lending platform"
            reasons.append(
                f"Used as DeFi collateral on {platform} "
                f"(${context.collateral_value:,.0f} collateral, "
                f"${context.borrowed_amount:,.0f} borrowed)"
            )

        return reasons

    def explain(self, factors: FactorSet, context: Optional[TokenizationContext] = None) -> str:
        """Join factor clauses, then any tokenization clauses."""
        reasons = self.factor_clauses(factors)
        if not reasons:
            reasons = [self.FALLBACK]
        reasons.extend(self.tokenization_clauses(context))
        return self.SEPARATOR.join(reasons)
