"""Blockchain name-service checks (ENS, Unstoppable Domains).

Lookups are simulated; no chain is contacted.
"""

from datetime import datetime, timezone
from typing import Dict, Any, Optional
from dataclasses import dataclass, field


BLOCKCHAIN_TLDS = (
    '.eth', '.crypto', '.nft', '.x', '.wallet', '.bitcoin',
    '.dao', '.888', '.zil', '.blockchain'
)

UNSTOPPABLE_TLDS = ('.crypto', '.nft', '.x', '.wallet', '.bitcoin', '.dao', '.888', '.zil')


def is_blockchain_domain(domain: str) -> bool:
    return domain.lower().endswith(BLOCKCHAIN_TLDS)


def _address(char: str) -> str:
    return "0x" + char * 40


@dataclass
class BlockchainResult:
    """Registration state of a blockchain domain."""
    available: bool = False
    type: Optional[str] = None
    owner: Optional[str] = None
    resolver: Optional[str] = None
    records: Dict[str, str] = field(default_factory=dict)
    expiry_date: Optional[datetime] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'available': self.available,
            'type': self.type,
            'checked_at': self.checked_at.isoformat()
        }
        if self.owner:
            result['owner'] = self.owner
        if self.resolver:
            result['resolver'] = self.resolver
        if self.records:
            result['records'] = dict(self.records)
        if self.expiry_date:
            result['expiry_date'] = self.expiry_date.isoformat()
        if self.error:
            result['error'] = self.error
        return result


class BlockchainChecker:
    """Simulated checker for blockchain name services."""

    TAKEN_ENS = {'test.eth', 'example.eth', 'hello.eth', 'world.eth'}
    TAKEN_UNSTOPPABLE = {'test.crypto', 'example.nft', 'hello.x'}

    def check(self, domain: str) -> BlockchainResult:
        domain = domain.lower()

        if domain.endswith('.eth'):
            return self._check_ens(domain)
        if domain.endswith(UNSTOPPABLE_TLDS):
            return self._check_unstoppable(domain)

        return BlockchainResult(error="unsupported blockchain domain type")

    def _check_ens(self, domain: str) -> BlockchainResult:
        result = BlockchainResult(type="ENS", available=self._simulate_lookup(domain, self.TAKEN_ENS))

        if not result.available:
            result.owner = _address("a")
            result.resolver = _address("b")
            result.records['ETH'] = _address("c")
            result.records['BTC'] = "bc1" + "d" * 39

        return result

    def _check_unstoppable(self, domain: str) -> BlockchainResult:
        result = BlockchainResult(
            type="Unstoppable Domains",
            available=self._simulate_lookup(domain, self.TAKEN_UNSTOPPABLE)
        )

        if not result.available:
            result.owner = _address("e")
            result.records['crypto.ETH.address'] = _address("f")
            result.records['crypto.BTC.address'] = "bc1" + "g" * 39

        return result

    @staticmethod
    def _simulate_lookup(domain: str, taken: set) -> bool:
        """Known names are taken; otherwise names over 3 chars are free."""
        if domain in taken:
            return False
        return len(domain.split('.')[0]) > 3
