"""DNS record lookups for a domain."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import List, Dict, Any, Optional, Tuple
from dataclasses import dataclass, field
import dns.exception
import dns.resolver
import dns.asyncresolver


logger = logging.getLogger(__name__)


def extract_tld(domain: str) -> str:
    """Return '.tld' for a domain, or '' when it has no dot."""
    name, sep, label = domain.rpartition('.')
    if not sep:
        return ''
    return '.' + label


@dataclass
class DNSResult:
    """Outcome of the record lookups for one domain."""
    available: Optional[bool]
    tld: str
    has_records: bool = False
    record_types: List[str] = field(default_factory=list)
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'available': self.available,
            'tld': self.tld,
            'has_records': self.has_records,
            'record_types': list(self.record_types),
            'checked_at': self.checked_at.isoformat()
        }
        if self.error:
            result['error'] = self.error
        return result


class DNSChecker:
    """Looks up A, MX, NS and TXT records concurrently."""

    RECORD_TYPES = ('A', 'MX', 'NS', 'TXT')

    def __init__(self, timeout: float = 5.0, max_concurrent: int = 4):
        self.timeout = timeout
        self.max_concurrent = max_concurrent
        self._semaphore: Optional[asyncio.Semaphore] = None

    async def _lookup_async(self, domain: str, rdtype: str) -> Tuple[str, Optional[bool], Optional[str]]:
        """Resolve one record type.

        Returns (rdtype, found, error); found is None when the lookup failed.
        """
        async with self._semaphore:
            try:
                resolver = dns.asyncresolver.Resolver()
                resolver.timeout = self.timeout
                resolver.lifetime = self.timeout

                answer = await resolver.resolve(domain, rdtype)
                return (rdtype, len(answer) > 0, None)
            except dns.resolver.NXDOMAIN:
                return (rdtype, False, None)  # No such domain
            except dns.resolver.NoAnswer:
                return (rdtype, False, None)  # Exists, no records of this type
            except dns.resolver.NoNameservers:
                return (rdtype, False, None)
            except dns.exception.Timeout:
                return (rdtype, None, f"{rdtype} lookup timed out")
            except dns.exception.DNSException as e:
                return (rdtype, None, f"{rdtype} lookup failed: {e}")

    async def check_async(self, domain: str) -> DNSResult:
        """Check every record type for a domain concurrently."""
        self._semaphore = asyncio.Semaphore(self.max_concurrent)

        tasks = [self._lookup_async(domain, rdtype) for rdtype in self.RECORD_TYPES]
        lookups = await asyncio.gather(*tasks)

        record_types = [rdtype for rdtype, found, _ in lookups if found]
        errors = [error for _, _, error in lookups if error]

        if record_types:
            available = False
        elif errors:
            available = None  # Unknown, nothing found but lookups failed
        else:
            available = True

        if errors:
            logger.warning("DNS lookups for %s failed: %s", domain, "; ".join(errors))

        return DNSResult(
            available=available,
            tld=extract_tld(domain),
            has_records=bool(record_types),
            record_types=record_types,
            error="; ".join(errors) or None
        )

    def check(self, domain: str) -> DNSResult:
        """Synchronous wrapper for the record lookups."""
        return asyncio.run(self.check_async(domain))
