"""Route discovery and quoting.

Module structure:
- quoter.py: Quoter facade class
- resolver.py: DirectQuoteResolver and QuoteResultDecoder
- multihop.py: MultiHopEnumerator for routes through one intermediate token
- scoring.py: RouteScorer and ScoringWeights
- advisor.py: price impact classification and slippage recommendations
- cache.py: QuoteCache with lazy TTL expiry
- config.py: QuoterConfig
"""

from dlmm.quoting.advisor import classify_impact, minimum_output, recommend_slippage
from dlmm.quoting.cache import QuoteCache
from dlmm.quoting.config import DEFAULT_QUOTER_CONFIG, QuoterConfig
from dlmm.quoting.multihop import MultiHopEnumerator, combine_hops
from dlmm.quoting.quoter import Quoter
from dlmm.quoting.resolver import DirectQuoteResolver, QuoteResultDecoder
from dlmm.quoting.scoring import RouteScorer, ScoringWeights

__all__ = [
    "DEFAULT_QUOTER_CONFIG",
    "DirectQuoteResolver",
    "MultiHopEnumerator",
    "QuoteCache",
    "QuoteResultDecoder",
    "Quoter",
    "QuoterConfig",
    "RouteScorer",
    "ScoringWeights",
    "classify_impact",
    "combine_hops",
    "minimum_output",
    "recommend_slippage",
]
