from .lexical import ValuationInput, LexicalSignals, split_domain, analyze_name
from .scorer import DomainScorer, FactorSet
from .explainer import Explainer
from .context import TokenizationContext
from .valuation import ValuationEngine, ValuationResult, Confidence

__all__ = [
    'ValuationInput', 'LexicalSignals', 'split_domain', 'analyze_name',
    'DomainScorer', 'FactorSet', 'Explainer', 'TokenizationContext',
    'ValuationEngine', 'ValuationResult', 'Confidence'
]
