"""Domain tokenization (DOMA protocol) lookups.

The engine only sees a TokenizationContext, so a real API client can
replace SimulatedTokenizationProvider without touching valuation.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import List, Dict, Any, Optional, Tuple
from dataclasses import dataclass, field, asdict
from ..scoring.context import TokenizationContext


TRADITIONAL_TLDS = ('.com', '.net', '.org', '.io', '.co', '.me', '.tv', '.cc', '.ws')
BRIDGEABLE_TLDS = ('.eth', '.crypto')

# Suffixes the simulation will consider for tokenization
TOKENIZABLE_TLDS = ('.com', '.net', '.org', '.io') + BRIDGEABLE_TLDS


def _address(char: str) -> str:
    return "0x" + char * 40


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class DomaRecord:
    token_id: str
    owner: str
    resolver: str
    records: Dict[str, str]
    registration_date: Optional[datetime] = None
    expiration_date: Optional[datetime] = None
    last_updated: Optional[datetime] = None
    sync_status: str = "synced"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'token_id': self.token_id,
            'owner': self.owner,
            'resolver': self.resolver,
            'records': dict(self.records),
            'registration_date': _isoformat(self.registration_date),
            'expiration_date': _isoformat(self.expiration_date),
            'last_updated': _isoformat(self.last_updated),
            'sync_status': self.sync_status
        }


@dataclass
class TokenRights:
    total: int
    available: int
    locked: int
    rights_breakdown: Dict[str, int] = field(default_factory=dict)
    fractional_owners: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class DeFiStatus:
    is_collateral: bool
    lending_platform: Optional[str] = None
    collateral_value: float = 0.0
    borrowed_amount: float = 0.0
    yield_generation: bool = False
    staking_rewards: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class TokenizationResult:
    """Tokenization state of a domain."""
    domain: str
    is_tokenized: bool = False
    tokenization_chain: Optional[str] = None
    doma_record: Optional[DomaRecord] = None
    token_rights: Optional[TokenRights] = None
    defi_status: Optional[DeFiStatus] = None
    cross_chain_data: Dict[str, Any] = field(default_factory=dict)
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    error: Optional[str] = None

    def to_context(self) -> TokenizationContext:
        """Reduce to the facts the valuation engine understands."""
        defi = self.defi_status
        return TokenizationContext(
            tokenized=self.is_tokenized,
            chain=self.tokenization_chain,
            is_collateral=bool(defi and defi.is_collateral),
            lending_platform=defi.lending_platform if defi else None,
            collateral_value=defi.collateral_value if defi else 0.0,
            borrowed_amount=defi.borrowed_amount if defi else 0.0
        )

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'domain': self.domain,
            'is_tokenized': self.is_tokenized,
            'checked_at': self.checked_at.isoformat()
        }
        if self.tokenization_chain:
            result['tokenization_chain'] = self.tokenization_chain
        if self.doma_record:
            result['doma_record'] = self.doma_record.to_dict()
        if self.token_rights:
            result['token_rights'] = self.token_rights.to_dict()
        if self.defi_status:
            result['defi_status'] = self.defi_status.to_dict()
        if self.cross_chain_data:
            result['cross_chain_data'] = self.cross_chain_data
        if self.error:
            result['error'] = self.error
        return result


class TokenizationProvider(ABC):
    """Source of tokenization data for a domain."""

    @abstractmethod
    def check(self, domain: str) -> TokenizationResult:
        """Return the tokenization state of a domain."""

    def is_eligible(self, domain: str) -> Tuple[bool, str]:
        """Whether a domain could be tokenized at all, with a reason."""
        domain = domain.lower()
        if domain.endswith(TRADITIONAL_TLDS):
            return True, "Traditional domain eligible for DOMA tokenization"
        if domain.endswith(BRIDGEABLE_TLDS):
            return True, "Blockchain domain eligible for DOMA bridge"
        return False, "Domain type not supported for DOMA tokenization"


class SimulatedTokenizationProvider(TokenizationProvider):
    """Deterministic stand-in for the DOMA API.

    Short names and crypto-flavoured names are reported as tokenized;
    mid-length names are tokenized when their length is even.
    """

    PREMIUM_TERMS = ['crypto', 'defi', 'nft', 'web3', 'blockchain', 'ethereum', 'bitcoin']
    CHAIN = "ethereum"
    LENDING_PLATFORM = "DOMA Lending"

    def __init__(self, clock=None):
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def check(self, domain: str) -> TokenizationResult:
        now = self._clock()
        result = TokenizationResult(domain=domain, checked_at=now)
        result.is_tokenized = self._is_tokenized(domain)

        if result.is_tokenized:
            result.doma_record = self._doma_record(domain, now)
            result.token_rights = self._token_rights()
            result.defi_status = self._defi_status()
            result.cross_chain_data = self._cross_chain_data(domain, now)
            result.tokenization_chain = self.CHAIN

        return result

    def _is_tokenized(self, domain: str) -> bool:
        domain = domain.lower()
        if not domain.endswith(TOKENIZABLE_TLDS):
            return False

        label = domain.split('.')[0]

        if len(label) <= 3:
            return True

        if any(term in label for term in self.PREMIUM_TERMS):
            return True

        if 4 <= len(label) <= 8:
            return len(label) % 2 == 0

        return False

    @staticmethod
    def generate_token_id(domain: str) -> str:
        return domain.encode('utf-8').hex()[:20]

    def _doma_record(self, domain: str, now: datetime) -> DomaRecord:
        return DomaRecord(
            token_id=self.generate_token_id(domain),
            owner=_address("1"),
            resolver=_address("2"),
            records={
                'A': "192.168.1.1",
                'AAAA': "2001:db8::1",
                'TXT': "v=spf1 include:_spf.google.com ~all",
                'ETH': _address("3"),
                'BTC': "bc1" + "4" * 39
            },
            registration_date=now - timedelta(days=365),
            expiration_date=now + timedelta(days=365),
            last_updated=now
        )

    def _token_rights(self) -> TokenRights:
        return TokenRights(
            total=1000,
            available=750,
            locked=250,
            rights_breakdown={'ownership': 500, 'revenue': 300, 'governance': 150, 'utility': 50},
            fractional_owners=[_address("a"), _address("b"), _address("c")]
        )

    def _defi_status(self) -> DeFiStatus:
        return DeFiStatus(
            is_collateral=True,
            lending_platform=self.LENDING_PLATFORM,
            collateral_value=50000.0,
            borrowed_amount=30000.0,
            yield_generation=True,
            staking_rewards=125.50
        )

    def _cross_chain_data(self, domain: str, now: datetime) -> Dict[str, Any]:
        return {
            'ethereum': {
                'contract_address': _address("e"),
                'token_id': self.generate_token_id(domain),
                'last_update': int(now.timestamp())
            },
            'polygon': {
                'contract_address': _address("f"),
                'bridged': True,
                'bridge_fee': 0.01
            },
            'arbitrum': {
                'contract_address': _address("d"),
                'layer2_benefits': True,
                'gas_savings': "95%"
            }
        }
