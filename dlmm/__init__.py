"""DLMM SDK - route discovery and quoting for discrete-bin liquidity pools."""

from dlmm.client import create_quoter, get_default_quoter
from dlmm.models import Quote, QuoteOptions, QuoteParams
from dlmm.quoting import Quoter, QuoterConfig

__version__ = "0.1.0"
__all__ = [
    "Quote",
    "QuoteOptions",
    "QuoteParams",
    "Quoter",
    "QuoterConfig",
    "create_quoter",
    "get_default_quoter",
    "__version__",
]
