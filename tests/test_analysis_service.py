"""Unit tests for the combined analysis service, with lookups stubbed"""

import pytest

from domainvalue.checkers import (
    AnalysisService, BlockchainResult, DNSResult, TokenizationResult, WhoisResult
)
from domainvalue.exceptions import InvalidDomainError
from domainvalue.scoring import ValuationEngine


class StubDNSChecker:
    def __init__(self):
        self.calls = []

    def check(self, domain):
        self.calls.append(domain)
        return DNSResult(available=False, tld=".com", has_records=True, record_types=['A'])


class StubWhoisChecker:
    def __init__(self):
        self.calls = []

    def lookup(self, domain):
        self.calls.append(domain)
        return WhoisResult(available=False, registrar="Example Registrar")


class StubBlockchainChecker:
    def __init__(self):
        self.calls = []

    def check(self, domain):
        self.calls.append(domain)
        return BlockchainResult(available=True, type="ENS")


class Broken:
    """Every lookup raises."""

    def check(self, domain):
        raise RuntimeError("network unreachable")

    def lookup(self, domain):
        raise RuntimeError("network unreachable")


@pytest.fixture
def stubs(tokenization_provider):
    return {
        'dns_checker': StubDNSChecker(),
        'whois_checker': StubWhoisChecker(),
        'blockchain_checker': StubBlockchainChecker(),
        'tokenization_provider': tokenization_provider,
    }


def test_traditional_domain_gets_dns_and_whois(stubs):
    result = AnalysisService(**stubs).analyze("app.com")

    assert stubs['dns_checker'].calls == ["app.com"]
    assert stubs['whois_checker'].calls == ["app.com"]
    assert stubs['blockchain_checker'].calls == []
    assert result.blockchain_data is None
    assert result.whois_data.registrar == "Example Registrar"
    assert result.tokenization_data.is_tokenized


def test_tokenization_reaches_reasoning_but_not_value(stubs):
    result = AnalysisService(**stubs).analyze("app.com")
    plain = ValuationEngine().evaluate("app.com")

    assert result.valuation_data.estimated_value == plain.estimated_value
    assert result.valuation_data.confidence == plain.confidence
    assert result.valuation_data.reasoning.startswith(plain.reasoning)
    assert "Tokenized on ethereum" in result.valuation_data.reasoning


def test_blockchain_domain_skips_dns_and_whois(stubs):
    result = AnalysisService(**stubs).analyze("myname.eth")

    assert stubs['blockchain_checker'].calls == ["myname.eth"]
    assert stubs['dns_checker'].calls == []
    assert stubs['whois_checker'].calls == []
    assert result.dns_availability is None
    assert result.whois_data is None
    assert result.blockchain_data.type == "ENS"
    assert result.valuation_data.estimated_value == 251


def test_failed_lookups_are_recorded_and_valuation_still_runs():
    broken = Broken()
    service = AnalysisService(
        dns_checker=broken,
        whois_checker=broken,
        blockchain_checker=broken,
        tokenization_provider=broken,
    )

    result = service.analyze("app.com")

    assert result.dns_availability.available is None
    assert result.dns_availability.error == "network unreachable"
    assert result.dns_availability.tld == ".com"
    assert result.whois_data.error == "network unreachable"
    assert result.tokenization_data.error == "network unreachable"
    assert result.valuation_data.reasoning == ValuationEngine().evaluate("app.com").reasoning


def test_failed_blockchain_lookup_is_recorded(stubs):
    stubs['blockchain_checker'] = Broken()

    result = AnalysisService(**stubs).analyze("vault.eth")

    assert result.blockchain_data.error == "network unreachable"
    assert result.valuation_data is not None


@pytest.mark.parametrize("domain", ["", "   "])
def test_blank_domain_is_rejected(stubs, domain):
    with pytest.raises(InvalidDomainError):
        AnalysisService(**stubs).analyze(domain)


def test_domain_without_suffix_gets_degraded_valuation(stubs):
    result = AnalysisService(**stubs).analyze("localhost")

    assert result.valuation_data.estimated_value == 10
    assert result.valuation_data.reasoning == "Invalid domain format"


def test_to_dict(stubs):
    data = AnalysisService(**stubs).analyze("app.com").to_dict()

    assert set(data) == {
        'domain', 'timestamp', 'dns_availability', 'blockchain_data',
        'tokenization_data', 'whois_data', 'valuation_data'
    }
    assert data['blockchain_data'] is None
    assert data['valuation_data']['confidence'] == "high"
    assert isinstance(data['tokenization_data'], dict)


def test_untokenized_result_is_passed_as_context(stubs):
    class Untokenized:
        def check(self, domain):
            return TokenizationResult(domain=domain)

    stubs['tokenization_provider'] = Untokenized()

    result = AnalysisService(**stubs).analyze("app.com")

    assert result.valuation_data.reasoning == ValuationEngine().evaluate("app.com").reasoning
