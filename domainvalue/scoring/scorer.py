"""Domain scoring model - turns lexical signals into valuation factors."""

from types import MappingProxyType
from typing import Dict, Any, Iterable, Mapping, Optional
from dataclasses import dataclass, asdict
from .lexical import ValuationInput, analyze_name, count_vowels_consonants


@dataclass(frozen=True)
class FactorSet:
    """Per-domain valuation factors.

    Scores live on their own scales: length 1-10, character 0-6,
    word open-ended, suffix 0-5.
    """
    length: int
    length_score: float
    character_score: float
    word_score: float
    suffix_score: float
    pronounceable: bool
    brandable: bool
    has_digits: bool
    has_hyphen: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


EMPTY_FACTORS = FactorSet(
    length=0,
    length_score=0.0,
    character_score=0.0,
    word_score=0.0,
    suffix_score=0.0,
    pronounceable=False,
    brandable=False,
    has_digits=False,
    has_hyphen=False
)


class DomainScorer:
    """Scores a domain's name and suffix into a FactorSet.

    Lookup tables default to the class constants and may be overridden at
    construction. They are frozen afterwards, so one scorer can be shared
    freely between threads.
    """

    # Premium coefficient per suffix, scaled by SUFFIX_SCALE
    DEFAULT_SUFFIX_PREMIUMS = {
        '.com': 1.0,
        '.net': 0.7,
        '.org': 0.6,
        '.io': 0.8,
        '.co': 0.6,
        '.app': 0.7,
        '.dev': 0.6,
        '.tech': 0.5,
        '.eth': 0.9,
        '.crypto': 0.8,
        '.nft': 0.7
    }

    SUFFIX_SCALE = 5.0
    UNKNOWN_SUFFIX_SCORE = 1.0

    # Keywords that add value wherever they appear in the name
    DEFAULT_PREMIUM_WORDS = (
        'app', 'web', 'tech', 'crypto', 'blockchain', 'ai', 'ml', 'data',
        'cloud', 'api', 'dev', 'code', 'digital', 'online', 'smart',
        'auto', 'health', 'finance', 'bank', 'pay', 'shop', 'store',
        'game', 'play', 'social', 'network', 'security', 'privacy'
    )

    # Whole-name dictionary matches
    DEFAULT_DICTIONARY_WORDS = (
        'app', 'web', 'net', 'tech', 'data', 'info', 'news', 'shop', 'store',
        'game', 'play', 'work', 'home', 'life', 'love', 'time', 'world',
        'best', 'new', 'top', 'first', 'last', 'good', 'great', 'super'
    )

    # Brand affixes for compound names like "webhub" or "getmax"
    DEFAULT_BRAND_PREFIXES = ('web', 'app', 'my', 'get', 'the', 'new', 'top', 'best')
    DEFAULT_BRAND_SUFFIXES = ('app', 'web', 'net', 'tech', 'hub', 'lab', 'pro', 'max')

    # Length tiers as (inclusive upper bound, score)
    LENGTH_TIERS = ((3, 10.0), (5, 8.0), (7, 6.0), (10, 4.0), (15, 2.0))
    MIN_LENGTH_SCORE = 1.0

    def __init__(
        self,
        suffix_premiums: Optional[Mapping[str, float]] = None,
        premium_words: Optional[Iterable[str]] = None,
        dictionary_words: Optional[Iterable[str]] = None,
        brand_prefixes: Optional[Iterable[str]] = None,
        brand_suffixes: Optional[Iterable[str]] = None
    ):
        # None means "use the built-in table"; an empty table disables it
        self.suffix_premiums = MappingProxyType(dict(
            suffix_premiums if suffix_premiums is not None else self.DEFAULT_SUFFIX_PREMIUMS
        ))
        self.premium_words = tuple(
            premium_words if premium_words is not None else self.DEFAULT_PREMIUM_WORDS
        )
        self.dictionary_words = frozenset(
            dictionary_words if dictionary_words is not None else self.DEFAULT_DICTIONARY_WORDS
        )
        self.brand_prefixes = tuple(
            brand_prefixes if brand_prefixes is not None else self.DEFAULT_BRAND_PREFIXES
        )
        self.brand_suffixes = tuple(
            brand_suffixes if brand_suffixes is not None else self.DEFAULT_BRAND_SUFFIXES
        )

    def score_length(self, length: int) -> float:
        """Coarse staircase: shorter names sit in scarcer tiers."""
        for upper, score in self.LENGTH_TIERS:
            if length <= upper:
                return score
        return self.MIN_LENGTH_SCORE

    def score_characters(self, name: str) -> float:
        """Score character composition, starting at 5.0."""
        signals = analyze_name(name)
        score = 5.0

        if signals.has_digits:
            score -= 2.0
        if signals.has_hyphen:
            score -= 1.5
        if signals.all_letters:
            score += 1.0
        if signals.mixed_case:
            score -= 0.5

        return max(0.0, score)

    def is_dictionary_word(self, name: str) -> bool:
        return name.lower() in self.dictionary_words

    def is_compound_word(self, name: str) -> bool:
        """Detect a brand affix joined to at least three more characters."""
        name_lower = name.lower()
        if len(name_lower) < 6:
            return False

        for prefix in self.brand_prefixes:
            if name_lower.startswith(prefix) and len(name_lower) > len(prefix) + 2:
                return True

        for suffix in self.brand_suffixes:
            if name_lower.endswith(suffix) and len(name_lower) > len(suffix) + 2:
                return True

        return False

    def score_words(self, name: str) -> float:
        """Score keyword value: premium substrings, dictionary and compound bonuses."""
        score = 0.0
        name_lower = name.lower()

        # +3 for each premium keyword contained anywhere in the name
        for word in self.premium_words:
            if word in name_lower:
                score += 3.0

        # +2 for an exact dictionary word
        if self.is_dictionary_word(name_lower):
            score += 2.0

        # +1 for a brandable compound
        if self.is_compound_word(name_lower):
            score += 1.0

        return score

    def score_suffix(self, suffix: str) -> float:
        coefficient = self.suffix_premiums.get(suffix)
        if coefficient is None:
            return self.UNKNOWN_SUFFIX_SCORE
        return coefficient * self.SUFFIX_SCALE

    def is_pronounceable(self, name: str) -> bool:
        """Check the consonant/vowel balance falls within [0.5, 4.0]."""
        vowels, consonants = count_vowels_consonants(name)
        if vowels == 0:
            return False
        ratio = consonants / vowels
        return 0.5 <= ratio <= 4.0

    def is_brandable(self, name: str) -> bool:
        """Strict gate: 3-12 chars, letters-friendly and pronounceable."""
        if len(name) < 3 or len(name) > 12:
            return False

        signals = analyze_name(name)
        if signals.has_digits or signals.has_hyphen:
            return False

        return self.is_pronounceable(name)

    def score(self, valuation_input: ValuationInput) -> FactorSet:
        """Calculate the full factor set for a split domain."""
        name = valuation_input.name
        signals = analyze_name(name)

        return FactorSet(
            length=signals.length,
            length_score=self.score_length(signals.length),
            character_score=self.score_characters(name),
            word_score=self.score_words(name),
            suffix_score=self.score_suffix(valuation_input.suffix),
            pronounceable=self.is_pronounceable(name),
            brandable=self.is_brandable(name),
            has_digits=signals.has_digits,
            has_hyphen=signals.has_hyphen
        )
