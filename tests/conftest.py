"""Shared fixtures"""

from datetime import datetime, timezone

import pytest

from domainvalue.checkers import SimulatedTokenizationProvider
from domainvalue.scoring import DomainScorer, ValuationEngine, Explainer


FIXED_NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def scorer():
    return DomainScorer()


@pytest.fixture
def engine():
    return ValuationEngine()


@pytest.fixture
def explainer():
    return Explainer()


@pytest.fixture
def tokenization_provider():
    return SimulatedTokenizationProvider(clock=lambda: FIXED_NOW)
