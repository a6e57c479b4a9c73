"""WHOIS lookups for registration details."""

import time
import logging
from datetime import datetime, timezone
from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field
import whois
from whois.exceptions import WhoisDomainNotFoundError


logger = logging.getLogger(__name__)


def _first(value: Any) -> Any:
    """WHOIS fields are often lists; keep the first entry."""
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _as_date(value: Any) -> Optional[datetime]:
    value = _first(value)
    return value if isinstance(value, datetime) else None


def _as_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return sorted({str(v) for v in value})
    return [str(value)]


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class WhoisResult:
    """Registration details for one domain."""
    available: Optional[bool]
    registrar: Optional[str] = None
    registration_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None
    name_servers: List[str] = field(default_factory=list)
    status: List[str] = field(default_factory=list)
    raw_data: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'available': self.available,
            'registrar': self.registrar,
            'registration_date': _isoformat(self.registration_date),
            'expiry_date': _isoformat(self.expiry_date),
            'updated_date': _isoformat(self.updated_date),
            'name_servers': list(self.name_servers),
            'status': list(self.status),
            'checked_at': self.checked_at.isoformat()
        }
        if self.error:
            result['error'] = self.error
        return result


class WhoisChecker:
    """WHOIS lookups with rate limiting and error classification."""

    RATE_LIMIT_PATTERNS = ['rate limit', 'too many requests', 'quota exceeded', 'try again later', 'blocked']
    AVAILABLE_PATTERNS = ['no match', 'not found', 'no entries', 'no data found', 'available', 'domain not found']
    REGISTERED_PATTERNS = ['registered', 'exists']

    def __init__(self, rate_limit_delay: float = 0.0, backoff_delay: float = 5.0):
        self.rate_limit_delay = rate_limit_delay
        self.backoff_delay = backoff_delay
        self._last_request_time = 0.0

    def _wait_for_rate_limit(self):
        """Ensure we don't exceed rate limits."""
        elapsed = time.time() - self._last_request_time
        if elapsed < self.rate_limit_delay:
            time.sleep(self.rate_limit_delay - elapsed)
        self._last_request_time = time.time()

    def _from_entry(self, entry: Any) -> WhoisResult:
        # No domain_name in the response means nobody holds it
        if getattr(entry, 'domain_name', None) is None:
            return WhoisResult(available=True, raw_data=getattr(entry, 'text', None))

        registrar = _first(getattr(entry, 'registrar', None))
        return WhoisResult(
            available=False,
            registrar=str(registrar) if registrar else None,
            registration_date=_as_date(getattr(entry, 'creation_date', None)),
            expiry_date=_as_date(getattr(entry, 'expiration_date', None)),
            updated_date=_as_date(getattr(entry, 'updated_date', None)),
            name_servers=_as_list(getattr(entry, 'name_servers', None)),
            status=_as_list(getattr(entry, 'status', None)),
            raw_data=getattr(entry, 'text', None)
        )

    def lookup(self, domain: str, retry: bool = True) -> WhoisResult:
        """Look up a domain's registration.

        available is True when unregistered, False when registered and
        None when the lookup failed (see error).
        """
        self._wait_for_rate_limit()

        try:
            entry = whois.whois(domain)
            return self._from_entry(entry)

        except WhoisDomainNotFoundError:
            return WhoisResult(available=True)
        except Exception as e:
            error_msg = str(e).lower()

            if any(p in error_msg for p in self.RATE_LIMIT_PATTERNS):
                if retry:
                    logger.info("WHOIS rate limited for %s, retrying in %.1fs", domain, self.backoff_delay)
                    time.sleep(self.backoff_delay)
                    return self.lookup(domain, retry=False)
                logger.warning("WHOIS rate limited for %s", domain)
                return WhoisResult(available=None, error=str(e))

            if any(p in error_msg for p in self.AVAILABLE_PATTERNS):
                return WhoisResult(available=True)

            if any(p in error_msg for p in self.REGISTERED_PATTERNS):
                return WhoisResult(available=False)

            logger.warning("WHOIS lookup for %s failed: %s", domain, e)
            return WhoisResult(available=None, error=str(e))
