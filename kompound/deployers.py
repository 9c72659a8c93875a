"""
Centralized deployers for all contracts in the project.
Each deployer is a VyperDeployer object returned using boa.load_partial().
"""

import boa

from kompound import CONTRACTS_DIR

# Base compiler args
compiler_args_default = {"experimental_codegen": False}

# Contract paths
BASE_CONTRACT_PATH = CONTRACTS_DIR
TESTING_CONTRACT_PATH = CONTRACTS_DIR / "testing"


def _load(path):
    return boa.load_partial(str(path), compiler_args=compiler_args_default)


# Core contracts
COMPOUND_ETH_DEPLOYER = _load(BASE_CONTRACT_PATH / "CompoundEth.vy")
COMPOUND_ERC20_DEPLOYER = _load(BASE_CONTRACT_PATH / "CompoundErc20.vy")
COMPOUND_LONG_DEPLOYER = _load(BASE_CONTRACT_PATH / "CompoundLong.vy")
COMPOUND_LIQUIDATOR_DEPLOYER = _load(BASE_CONTRACT_PATH / "CompoundLiquidator.vy")
LOCK_DEPLOYER = _load(BASE_CONTRACT_PATH / "Lock.vy")

# Testing/Mock contracts
MOCK_ERC20_DEPLOYER = _load(TESTING_CONTRACT_PATH / "MockERC20.vy")
MOCK_CERC20_DEPLOYER = _load(TESTING_CONTRACT_PATH / "MockCERC20.vy")
MOCK_CETHER_DEPLOYER = _load(TESTING_CONTRACT_PATH / "MockCEther.vy")
MOCK_COMPTROLLER_DEPLOYER = _load(TESTING_CONTRACT_PATH / "MockComptroller.vy")
MOCK_PRICE_FEED_DEPLOYER = _load(TESTING_CONTRACT_PATH / "MockPriceFeed.vy")

# Contract name -> deployer, as referenced from deployment modules
DEPLOYERS = {
    "CompoundEth": COMPOUND_ETH_DEPLOYER,
    "CompoundErc20": COMPOUND_ERC20_DEPLOYER,
    "CompoundLong": COMPOUND_LONG_DEPLOYER,
    "CompoundLiquidator": COMPOUND_LIQUIDATOR_DEPLOYER,
    "Lock": LOCK_DEPLOYER,
    "MockERC20": MOCK_ERC20_DEPLOYER,
    "MockCERC20": MOCK_CERC20_DEPLOYER,
    "MockCEther": MOCK_CETHER_DEPLOYER,
    "MockComptroller": MOCK_COMPTROLLER_DEPLOYER,
    "MockPriceFeed": MOCK_PRICE_FEED_DEPLOYER,
}
