"""Domain valuation engine."""

import logging
from enum import Enum
from typing import Dict, Any, Optional
from dataclasses import dataclass
from .lexical import split_domain
from .scorer import DomainScorer, FactorSet, EMPTY_FACTORS
from .explainer import Explainer
from .context import TokenizationContext


logger = logging.getLogger(__name__)


class Confidence(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class ValuationResult:
    """Estimated value of a domain with its supporting factors."""
    estimated_value: int
    currency: str
    confidence: Confidence
    factors: FactorSet
    reasoning: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'estimated_value': self.estimated_value,
            'currency': self.currency,
            'confidence': self.confidence.value,
            'factors': self.factors.to_dict(),
            'reasoning': self.reasoning
        }


class ValuationEngine:
    """Combines domain factors into a bounded dollar estimate.

    The engine keeps no per-call state; ``evaluate`` is safe to call from
    any number of threads at once.
    """

    CURRENCY = "USD"
    BASE_VALUE = 100.0
    MIN_VALUE = 10
    MAX_VALUE = 1_000_000

    BRANDABLE_BONUS = 1.5
    PRONOUNCEABLE_BONUS = 1.2
    DIGIT_PENALTY = 0.7
    HYPHEN_PENALTY = 0.6

    def __init__(self, scorer: Optional[DomainScorer] = None, explainer: Optional[Explainer] = None):
        self.scorer = scorer or DomainScorer()
        self.explainer = explainer or Explainer()

    def calculate_value(self, factors: FactorSet) -> float:
        """Apply the multiplier chain to the base value and clamp it.

        Steps run in a fixed order: the word bonus is added after the
        multiplicative length/character/suffix terms, so a zero character
        or suffix score is not cancelled by multiplication later on.
        """
        multiplier = 1.0
        multiplier *= (factors.length_score / 10.0) * 2.0
        multiplier *= factors.character_score / 5.0
        multiplier *= factors.suffix_score / 5.0
        multiplier += factors.word_score / 10.0

        if factors.brandable:
            multiplier *= self.BRANDABLE_BONUS
        if factors.pronounceable:
            multiplier *= self.PRONOUNCEABLE_BONUS

        if factors.has_digits:
            multiplier *= self.DIGIT_PENALTY
        if factors.has_hyphen:
            multiplier *= self.HYPHEN_PENALTY

        value = self.BASE_VALUE * multiplier
        return min(max(value, self.MIN_VALUE), self.MAX_VALUE)

    def determine_confidence(self, factors: FactorSet) -> Confidence:
        """Point rubric, independent of the estimate itself (max 8)."""
        points = 0

        if factors.length <= 5:
            points += 2
        if factors.brandable:
            points += 2
        if factors.pronounceable:
            points += 1
        if factors.suffix_score >= 4.0:
            points += 2
        if not factors.has_digits and not factors.has_hyphen:
            points += 1

        if points >= 6:
            return Confidence.HIGH
        if points >= 3:
            return Confidence.MEDIUM
        return Confidence.LOW

    def evaluate(self, domain: str, context: Optional[TokenizationContext] = None) -> ValuationResult:
        """Value a domain. Never raises: malformed input gets a floor estimate."""
        valuation_input = split_domain(domain)

        if not valuation_input.suffix:
            logger.debug("No suffix in %r, returning floor estimate", domain)
            return ValuationResult(
                estimated_value=self.MIN_VALUE,
                currency=self.CURRENCY,
                confidence=Confidence.LOW,
                factors=EMPTY_FACTORS,
                reasoning=Explainer.INVALID_FORMAT
            )

        factors = self.scorer.score(valuation_input)
        value = self.calculate_value(factors)
        confidence = self.determine_confidence(factors)

        logger.debug("Valued %s at %.2f (%s)", domain, value, confidence.value)

        return ValuationResult(
            estimated_value=int(value),
            currency=self.CURRENCY,
            confidence=confidence,
            factors=factors,
            reasoning=self.explainer.explain(factors, context)
        )
