"""Unit tests for the simulated tokenization provider"""

import pytest

from domainvalue.checkers import SimulatedTokenizationProvider, TokenizationProvider
from domainvalue.scoring import TokenizationContext
from tests.conftest import FIXED_NOW


@pytest.mark.parametrize("domain,expected", [
    ("app.com", True),             # short label
    ("defiswap.com", True),        # premium term
    ("mycryptostore.io", True),    # premium term in a long label
    ("abcd.net", True),            # mid-length, even
    ("abcde.org", False),          # mid-length, odd
    ("abcdefghijk.com", False),    # too long, no premium term
    ("abc.xyz", False),            # suffix not tokenizable
    ("vault.eth", False),          # odd length
    ("wallet.crypto", True),       # even length, bridgeable suffix
])
def test_tokenization_status(tokenization_provider, domain, expected):
    assert tokenization_provider.check(domain).is_tokenized is expected


def test_tokenized_domain_has_full_record(tokenization_provider):
    result = tokenization_provider.check("app.com")

    assert result.tokenization_chain == "ethereum"
    assert result.doma_record.token_id == "6170702e636f6d"
    assert result.doma_record.sync_status == "synced"
    assert result.doma_record.last_updated == FIXED_NOW
    assert result.doma_record.expiration_date > FIXED_NOW > result.doma_record.registration_date
    assert result.token_rights.total == 1000
    assert result.token_rights.available + result.token_rights.locked == 1000
    assert result.defi_status.is_collateral
    assert set(result.cross_chain_data) == {'ethereum', 'polygon', 'arbitrum'}
    assert result.error is None


def test_untokenized_domain_is_bare(tokenization_provider):
    result = tokenization_provider.check("abcde.org")

    assert result.doma_record is None
    assert result.defi_status is None
    assert result.cross_chain_data == {}
    assert result.to_dict() == {
        'domain': "abcde.org",
        'is_tokenized': False,
        'checked_at': FIXED_NOW.isoformat(),
    }


def test_token_id_is_truncated_hex():
    token_id = SimulatedTokenizationProvider.generate_token_id("averyveryverylongname.com")
    assert len(token_id) == 20
    assert token_id == "averyveryverylongname.com".encode().hex()[:20]


def test_to_context(tokenization_provider):
    context = tokenization_provider.check("app.com").to_context()

    assert context == TokenizationContext(
        tokenized=True,
        chain="ethereum",
        is_collateral=True,
        lending_platform="DOMA Lending",
        collateral_value=50000.0,
        borrowed_amount=30000.0,
    )


def test_to_context_for_untokenized(tokenization_provider):
    context = tokenization_provider.check("abcde.org").to_context()
    assert context == TokenizationContext(tokenized=False)


@pytest.mark.parametrize("domain,eligible,reason", [
    ("example.com", True, "Traditional domain eligible for DOMA tokenization"),
    ("example.me", True, "Traditional domain eligible for DOMA tokenization"),
    ("example.eth", True, "Blockchain domain eligible for DOMA bridge"),
    ("example.nft", False, "Domain type not supported for DOMA tokenization"),
])
def test_is_eligible(tokenization_provider, domain, eligible, reason):
    assert tokenization_provider.is_eligible(domain) == (eligible, reason)


def test_provider_interface_cannot_be_instantiated():
    with pytest.raises(TypeError):
        TokenizationProvider()
