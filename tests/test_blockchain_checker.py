"""Unit tests for the simulated blockchain checker"""

import pytest

from domainvalue.checkers import BlockchainChecker, is_blockchain_domain


@pytest.fixture
def checker():
    return BlockchainChecker()


@pytest.mark.parametrize("domain,expected", [
    ("vitalik.eth", True),
    ("hello.x", True),
    ("satoshi.bitcoin", True),
    ("lucky.888", True),
    ("chain.blockchain", True),
    ("app.com", False),
    ("max", False),
])
def test_is_blockchain_domain(domain, expected):
    assert is_blockchain_domain(domain) is expected


def test_taken_ens_name_has_owner_and_records(checker):
    result = checker.check("test.eth")

    assert result.type == "ENS"
    assert not result.available
    assert result.owner == "0x" + "a" * 40
    assert result.resolver == "0x" + "b" * 40
    assert set(result.records) == {'ETH', 'BTC'}


def test_long_ens_name_is_available(checker):
    result = checker.check("myname.eth")

    assert result.available
    assert result.owner is None
    assert result.records == {}


def test_short_ens_name_is_taken(checker):
    assert not checker.check("abc.eth").available


def test_unstoppable_domains(checker):
    taken = checker.check("hello.x")
    assert taken.type == "Unstoppable Domains"
    assert not taken.available
    assert 'crypto.ETH.address' in taken.records
    assert taken.resolver is None

    assert checker.check("coolname.crypto").available


def test_unsupported_blockchain_suffix_reports_error(checker):
    result = checker.check("chain.blockchain")

    assert result.error == "unsupported blockchain domain type"
    assert result.to_dict()['error'] == "unsupported blockchain domain type"
