"""Lexical analysis of domain strings."""

from dataclasses import dataclass


VOWELS = frozenset('aeiou')


@dataclass(frozen=True)
class ValuationInput:
    """Domain split into its name and lower-cased suffix."""
    name: str
    suffix: str


@dataclass(frozen=True)
class LexicalSignals:
    """Structural signals computed over the name only."""
    length: int
    has_digits: bool
    has_hyphen: bool
    all_letters: bool
    mixed_case: bool


def split_domain(domain: str) -> ValuationInput:
    """Split a domain on its last dot.

    'app.com' -> ('app', '.com'), 'blog.app.io' -> ('blog.app', '.io').
    A string without a dot keeps everything in the name and gets an
    empty suffix.
    """
    name, sep, label = domain.rpartition('.')
    if not sep:
        return ValuationInput(name=domain, suffix='')
    return ValuationInput(name=name, suffix='.' + label.lower())


def has_digits(name: str) -> bool:
    return any(c.isdecimal() for c in name)


def has_hyphen(name: str) -> bool:
    return '-' in name


def is_all_letters(name: str) -> bool:
    # Vacuously true for an empty name
    return all(c.isalpha() for c in name)


def has_mixed_case(name: str) -> bool:
    return any(c.isupper() for c in name) and any(c.islower() for c in name)


def count_vowels_consonants(name: str) -> tuple[int, int]:
    """Count vowels and consonants (letters only) in the lower-cased name."""
    vowels = 0
    consonants = 0
    for c in name.lower():
        if c in VOWELS:
            vowels += 1
        elif c.isalpha():
            consonants += 1
    return vowels, consonants


def analyze_name(name: str) -> LexicalSignals:
    """Compute all structural signals for a name."""
    return LexicalSignals(
        length=len(name),
        has_digits=has_digits(name),
        has_hyphen=has_hyphen(name),
        all_letters=is_all_letters(name),
        mixed_case=has_mixed_case(name),
    )
