from kompound.addresses import COMPTROLLER, PRICE_FEED, CETH, CWBTC, WBTC, WBTC_DECIMALS
from kompound.modules.base import Module


def build(m):
    compound_eth = m.contract("CompoundEth", [CETH])
    compound_erc20 = m.contract("CompoundErc20", [WBTC, CWBTC, COMPTROLLER, PRICE_FEED])
    compound_long = m.contract(
        "CompoundLong",
        [CETH, CWBTC, WBTC, WBTC_DECIMALS, COMPTROLLER, PRICE_FEED],
    )
    compound_liquidator = m.contract("CompoundLiquidator", [WBTC, CWBTC, COMPTROLLER])

    return {
        "compoundEth": compound_eth,
        "compoundErc20": compound_erc20,
        "compoundLong": compound_long,
        "compoundLiquidator": compound_liquidator,
    }


MainnetKompoundModule = Module("MainnetKompoundModule", build)
