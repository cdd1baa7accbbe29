"""Protocol constants for the DLMM SDK.

Centralizes deployed contract addresses, contract module/function names and
quoting parameters.
"""

from dataclasses import dataclass

# Bin price fixed-point scale (prices are Q64.64)
PRICE_SCALE = 2**64

# Basis points denominator (10000 bps = 100%)
BPS_DENOMINATOR = 10_000

# Bin steps offered by the pool factory
ALLOWED_BIN_STEPS = (1, 5, 10, 25, 50, 100, 200, 500, 1000)

# Bin step assumed for a hop when the quoter response does not carry one
DEFAULT_BIN_STEP = 25

# Gas reported by the quoter contract when the response omits it
DEFAULT_QUOTE_GAS = 150_000

# Route gas model used when a quote carries no gas estimate
ROUTE_BASE_GAS = 100_000
ROUTE_GAS_PER_HOP = 150_000

# Default slippage tolerance (0.5%)
DEFAULT_SLIPPAGE_BPS = 50

# Quote cache time-to-live in seconds
QUOTE_CACHE_TTL = 10.0

# Sui system clock object, passed to every quoter call
CLOCK_OBJECT_ID = "0x6"

# Sender used for read-only simulated calls
ZERO_SENDER = "0x" + "0" * 64


@dataclass(frozen=True)
class NetworkAddresses:
    """Deployed contract object ids for one network."""

    package_id: str
    factory_id: str
    upgrade_cap: str


TESTNET_ADDRESSES = NetworkAddresses(
    package_id="0x6a01a88c704d76ef8b0d4db811dff4dd13104a35e7a125131fa35949d0bc2ada",
    factory_id="0x160e34d10029993bccf6853bb5a5140bcac1794b7c2faccc060fb3d5b7167d7f",
    upgrade_cap="0xfe189ba6983053715ad68254c2a316cfef70f06b442ce54c7f47f3b0fbadecef",
)

# Not deployed yet
MAINNET_ADDRESSES = NetworkAddresses(package_id="", factory_id="", upgrade_cap="")
DEVNET_ADDRESSES = NetworkAddresses(package_id="", factory_id="", upgrade_cap="")

NETWORK_ADDRESSES = {
    "testnet": TESTNET_ADDRESSES,
    "mainnet": MAINNET_ADDRESSES,
    "devnet": DEVNET_ADDRESSES,
}


def get_addresses(network: str) -> NetworkAddresses:
    """Get deployed contract addresses for a network.

    Raises:
        ValueError: If the network is unknown
    """
    try:
        return NETWORK_ADDRESSES[network]
    except KeyError:
        raise ValueError(f"Unsupported network: {network}") from None


# Contract module holding the quote entry point
QUOTER_MODULE = "quoter"

# Contract entry points used for pricing
GET_QUOTE_FUNCTION = "get_quote"

# Intermediate tokens tried for two-hop routes, in priority order.
# Liquid majors on testnet; override through QuoterConfig.
DEFAULT_INTERMEDIATE_TOKENS = (
    "DEMO_USDC",
    "DEMO_ETH",
    "DEMO_BTC",
)
