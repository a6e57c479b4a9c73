"""Combined domain analysis service."""

import logging
from datetime import datetime, timezone
from typing import Dict, Optional, Any
from dataclasses import dataclass, field
from .dns_checker import DNSChecker, DNSResult, extract_tld
from .whois_checker import WhoisChecker, WhoisResult
from .blockchain_checker import BlockchainChecker, BlockchainResult, is_blockchain_domain
from .tokenization import TokenizationProvider, SimulatedTokenizationProvider, TokenizationResult
from ..scoring import ValuationEngine, ValuationResult
from ..exceptions import InvalidDomainError


logger = logging.getLogger(__name__)


def _dict_or_none(value) -> Optional[Dict[str, Any]]:
    return value.to_dict() if value is not None else None


@dataclass
class AnalysisResult:
    """Everything known about one domain."""
    domain: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    dns_availability: Optional[DNSResult] = None
    blockchain_data: Optional[BlockchainResult] = None
    tokenization_data: Optional[TokenizationResult] = None
    whois_data: Optional[WhoisResult] = None
    valuation_data: Optional[ValuationResult] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'domain': self.domain,
            'timestamp': self.timestamp.isoformat(),
            'dns_availability': _dict_or_none(self.dns_availability),
            'blockchain_data': _dict_or_none(self.blockchain_data),
            'tokenization_data': _dict_or_none(self.tokenization_data),
            'whois_data': _dict_or_none(self.whois_data),
            'valuation_data': _dict_or_none(self.valuation_data)
        }


class AnalysisService:
    """Runs every lookup for a domain and values it.

    Lookup failures are recorded on their own result and never stop the
    valuation, which depends only on the domain string.
    """

    def __init__(
        self,
        dns_checker: Optional[DNSChecker] = None,
        whois_checker: Optional[WhoisChecker] = None,
        blockchain_checker: Optional[BlockchainChecker] = None,
        tokenization_provider: Optional[TokenizationProvider] = None,
        engine: Optional[ValuationEngine] = None
    ):
        self.dns_checker = dns_checker or DNSChecker()
        self.whois_checker = whois_checker or WhoisChecker()
        self.blockchain_checker = blockchain_checker or BlockchainChecker()
        self.tokenization_provider = tokenization_provider or SimulatedTokenizationProvider()
        self.engine = engine or ValuationEngine()

    def _check_tokenization(self, domain: str) -> TokenizationResult:
        try:
            return self.tokenization_provider.check(domain)
        except Exception as e:
            logger.warning("Tokenization check for %s failed: %s", domain, e)
            return TokenizationResult(domain=domain, error=str(e))

    def _check_blockchain(self, domain: str) -> BlockchainResult:
        try:
            return self.blockchain_checker.check(domain)
        except Exception as e:
            logger.warning("Blockchain check for %s failed: %s", domain, e)
            return BlockchainResult(error=str(e))

    def _check_dns(self, domain: str) -> DNSResult:
        try:
            return self.dns_checker.check(domain)
        except Exception as e:
            logger.warning("DNS check for %s failed: %s", domain, e)
            return DNSResult(available=None, tld=extract_tld(domain), error=str(e))

    def _check_whois(self, domain: str) -> WhoisResult:
        try:
            return self.whois_checker.lookup(domain)
        except Exception as e:
            logger.warning("WHOIS lookup for %s failed: %s", domain, e)
            return WhoisResult(available=None, error=str(e))

    def analyze(self, domain: str) -> AnalysisResult:
        """Analyze a single domain.

        Args:
            domain: Full domain name (e.g., 'example.com'), already cleaned
        """
        if not domain or not domain.strip():
            raise InvalidDomainError("domain cannot be empty")

        result = AnalysisResult(domain=domain)

        # Tokenization runs for every domain and feeds the valuation reasoning
        result.tokenization_data = self._check_tokenization(domain)

        if is_blockchain_domain(domain):
            result.blockchain_data = self._check_blockchain(domain)
        else:
            result.dns_availability = self._check_dns(domain)
            result.whois_data = self._check_whois(domain)

        context = None
        if result.tokenization_data.error is None:
            context = result.tokenization_data.to_context()

        result.valuation_data = self.engine.evaluate(domain, context)
        return result
