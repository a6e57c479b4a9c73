from .dns_checker import DNSChecker, DNSResult
from .whois_checker import WhoisChecker, WhoisResult
from .blockchain_checker import BlockchainChecker, BlockchainResult, is_blockchain_domain
from .tokenization import TokenizationProvider, SimulatedTokenizationProvider, TokenizationResult
from .analysis_service import AnalysisService, AnalysisResult

__all__ = [
    'DNSChecker', 'DNSResult', 'WhoisChecker', 'WhoisResult',
    'BlockchainChecker', 'BlockchainResult', 'is_blockchain_domain',
    'TokenizationProvider', 'SimulatedTokenizationProvider', 'TokenizationResult',
    'AnalysisService', 'AnalysisResult'
]
