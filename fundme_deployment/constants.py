from pathlib import Path
from types import MappingProxyType

import fundme_deployment

#
# Filesystem
#

DEPLOYMENT_DIR = Path(fundme_deployment.__file__).parent
CONSTRUCTOR_PARAMS_DIR = DEPLOYMENT_DIR / "constructor_params"
DEFAULT_PARAMS_FILEPATH = CONSTRUCTOR_PARAMS_DIR / "fundme.yml"

#
# Networks
#

HARDHAT = "hardhat"
LOCALHOST = "localhost"
APE_LOCAL = "local"

DEVELOPMENT_CHAINS = frozenset([HARDHAT, LOCALHOST, APE_LOCAL])

MAINNET_CHAIN_ID = 1
POLYGON_CHAIN_ID = 137
SEPOLIA_CHAIN_ID = 11155111

NETWORK_CONFIG = MappingProxyType(
    {
        # chain id -> network parameters
        SEPOLIA_CHAIN_ID: {
            "name": "sepolia",
            "eth_usd_price_feed": "0x694AA1769357215DE4FAC081bf1f309aDC325306",
        },
        POLYGON_CHAIN_ID: {
            "name": "polygon",
            "eth_usd_price_feed": "0xF9680D99D6C9589e2a93a78A04A279e509205945",
        },
    }
)

DEFAULT_CONFIRMATIONS = 1

#
# Contracts
#

FUND_ME = "FundMe"
MOCK_V3_AGGREGATOR = "MockV3Aggregator"

# MockV3Aggregator constructor: 8 decimals, ETH at 2000 USD
MOCK_DECIMALS = 8
MOCK_INITIAL_ANSWER = 200000000000

#
# Tags
#

ALL_TAG = "all"
FUND_ME_TAG = "fundme"
MOCKS_TAG = "mocks"

FUND_ME_TAGS = (ALL_TAG, FUND_ME_TAG)
MOCKS_TAGS = (ALL_TAG, MOCKS_TAG)

#
# Verification
#

ETHERSCAN_API_KEY_ENVVAR = "ETHERSCAN_API_KEY"

COMPLETION_MARKER = "-" * 40
