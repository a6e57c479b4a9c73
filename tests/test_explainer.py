"""Unit tests for valuation reasoning"""

import pytest

from domainvalue.scoring import FactorSet, TokenizationContext


def factors(**overrides):
    values = dict(
        length=8,
        length_score=4.0,
        character_score=6.0,
        word_score=0.0,
        suffix_score=5.0,
        pronounceable=False,
        brandable=False,
        has_digits=False,
        has_hyphen=False,
    )
    values.update(overrides)
    return FactorSet(**values)


@pytest.mark.parametrize("length,clause", [
    (2, "Very short domain (premium)"),
    (3, "Very short domain (premium)"),
    (5, "Short and memorable"),
    (16, "Long domain name"),
])
def test_length_clause(explainer, length, clause):
    assert explainer.explain(factors(length=length)) == clause


def test_fallback_when_nothing_applies(explainer):
    assert explainer.explain(factors()) == "Standard domain name"


def test_clauses_follow_fixed_order(explainer):
    reasoning = explainer.explain(factors(
        length=4,
        brandable=True,
        pronounceable=True,
        word_score=3.0,
        has_digits=True,
        has_hyphen=True,
    ))

    assert reasoning == (
        "Short and memorable; Brandable name; Easy to pronounce; "
        "Contains valuable keywords; Contains numbers (reduces value); "
        "Contains hyphens (reduces value)"
    )


def test_word_clause_needs_more_than_two_points(explainer):
    assert explainer.explain(factors(word_score=2.0)) == "Standard domain name"
    assert explainer.explain(factors(word_score=2.5)) == "Contains valuable keywords"


def test_explain_is_idempotent(explainer):
    f = factors(length=3, brandable=True, pronounceable=True)
    assert explainer.explain(f) == explainer.explain(f)


def test_tokenization_clauses_are_appended(explainer):
    context = TokenizationContext(
        tokenized=True,
        chain="ethereum",
        is_collateral=True,
        lending_platform="DOMA Lending",
        collateral_value=50000.0,
        borrowed_amount=30000.0,
    )

    assert explainer.explain(factors(), context) == (
        "Standard domain name; Tokenized on ethereum; "
        "Used as DeFi collateral on DOMA Lending ($50,000 collateral, $30,000 borrowed)"
    )


def test_untokenized_context_adds_nothing(explainer):
    context = TokenizationContext(tokenized=False)
    assert explainer.explain(factors(), context) == explainer.explain(factors())


def test_tokenized_without_chain_or_collateral(explainer):
    context = TokenizationContext(tokenized=True)
    assert explainer.tokenization_clauses(context) == ["Tokenized"]
