"""Package exceptions."""


class DomainValueError(Exception):
    """Base exception for domainvalue"""

    pass


class InvalidDomainError(DomainValueError):
    """Domain string is empty after cleanup"""

    pass


class ConfigError(DomainValueError):
    """Configuration file is unreadable or malformed"""

    pass


class UnsupportedFormatError(DomainValueError):
    """Requested output format is not one we can render"""

    pass
