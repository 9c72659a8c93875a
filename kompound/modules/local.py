from kompound.addresses import WBTC_DECIMALS
from kompound.modules.base import Module


def build(m):
    # Mock Compound core contracts
    mock_comptroller = m.contract("MockComptroller")
    mock_price_feed = m.contract("MockPriceFeed")

    # Mock tokens and cTokens for local testing
    mock_wbtc = m.contract("MockERC20", ["Wrapped Bitcoin", "WBTC", WBTC_DECIMALS])
    mock_ceth = m.contract("MockCEther", ["Compound Ether", "cETH"])
    mock_cwbtc = m.contract("MockCERC20", ["Compound WBTC", "cWBTC"])

    # Our contracts, wired to the mocks
    compound_eth = m.contract("CompoundEth", [mock_ceth])

    compound_erc20 = m.contract(
        "CompoundErc20",
        [mock_wbtc, mock_cwbtc, mock_comptroller, mock_price_feed],
    )

    compound_long = m.contract(
        "CompoundLong",
        [mock_ceth, mock_cwbtc, mock_wbtc, WBTC_DECIMALS, mock_comptroller, mock_price_feed],
    )

    compound_liquidator = m.contract(
        "CompoundLiquidator",
        [mock_wbtc, mock_cwbtc, mock_comptroller],
    )

    return {
        "mockWBTC": mock_wbtc,
        "mockCEth": mock_ceth,
        "mockCWBTC": mock_cwbtc,
        "mockComptroller": mock_comptroller,
        "mockPriceFeed": mock_price_feed,
        "compoundEth": compound_eth,
        "compoundErc20": compound_erc20,
        "compoundLong": compound_long,
        "compoundLiquidator": compound_liquidator,
    }


KompoundModule = Module("KompoundModule", build)
