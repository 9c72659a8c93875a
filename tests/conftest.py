import os
from datetime import timedelta

import boa
import pytest
from hypothesis import settings, Phase
from kompound.deployers import (
    COMPOUND_ERC20_DEPLOYER,
    COMPOUND_ETH_DEPLOYER,
    COMPOUND_LIQUIDATOR_DEPLOYER,
    COMPOUND_LONG_DEPLOYER,
    MOCK_CERC20_DEPLOYER,
    MOCK_CETHER_DEPLOYER,
    MOCK_COMPTROLLER_DEPLOYER,
    MOCK_ERC20_DEPLOYER,
    MOCK_PRICE_FEED_DEPLOYER,
)


boa.env.enable_fast_mode()


TOKEN_DECIMALS = 18
FUND_AMOUNT = 1000 * 10**18


settings.register_profile("no-shrink", settings(phases=list(Phase)[:4]), deadline=timedelta(seconds=1000))
settings.register_profile("default", deadline=timedelta(seconds=1000))
settings.load_profile(os.getenv(u"HYPOTHESIS_PROFILE", "default"))


@pytest.fixture(autouse=True)
def isolate():
    with boa.env.anchor():
        yield


# ============== Account Fixtures ==============

@pytest.fixture(scope="session")
def accounts():
    return [boa.env.generate_address() for _ in range(10)]


@pytest.fixture(scope="session")
def admin():
    return boa.env.generate_address("admin")


@pytest.fixture(scope="session")
def alice(accounts):
    return accounts[1]


@pytest.fixture(scope="session")
def bob(accounts):
    return accounts[2]


# ============== Mock Compound Fixtures ==============

@pytest.fixture(scope="module")
def mock_token(admin):
    with boa.env.prank(admin):
        return MOCK_ERC20_DEPLOYER.deploy("Mock Token", "MTK", TOKEN_DECIMALS)


@pytest.fixture(scope="module")
def mock_ctoken(admin):
    with boa.env.prank(admin):
        return MOCK_CERC20_DEPLOYER.deploy("Mock cToken", "cMTK")


@pytest.fixture(scope="module")
def mock_cether(admin):
    with boa.env.prank(admin):
        return MOCK_CETHER_DEPLOYER.deploy("Compound Ether", "cETH")


@pytest.fixture(scope="module")
def mock_comptroller(admin):
    with boa.env.prank(admin):
        return MOCK_COMPTROLLER_DEPLOYER.deploy()


@pytest.fixture(scope="module")
def mock_price_feed(admin):
    with boa.env.prank(admin):
        return MOCK_PRICE_FEED_DEPLOYER.deploy()


# ============== Contracts Under Test ==============

@pytest.fixture(scope="module")
def compound_eth(admin, mock_cether):
    with boa.env.prank(admin):
        return COMPOUND_ETH_DEPLOYER.deploy(mock_cether.address)


@pytest.fixture(scope="module")
def compound_erc20(admin, alice, mock_token, mock_ctoken, mock_comptroller, mock_price_feed):
    with boa.env.prank(admin):
        contract = COMPOUND_ERC20_DEPLOYER.deploy(
            mock_token.address,
            mock_ctoken.address,
            mock_comptroller.address,
            mock_price_feed.address,
        )

    # Fund alice and let the contract spend her tokens
    mock_token.mint(alice, FUND_AMOUNT)
    with boa.env.prank(alice):
        mock_token.approve(contract.address, FUND_AMOUNT)

    return contract


@pytest.fixture(scope="module")
def compound_long(admin, mock_cether, mock_ctoken, mock_token, mock_comptroller, mock_price_feed):
    with boa.env.prank(admin):
        return COMPOUND_LONG_DEPLOYER.deploy(
            mock_cether.address,
            mock_ctoken.address,
            mock_token.address,
            TOKEN_DECIMALS,
            mock_comptroller.address,
            mock_price_feed.address,
        )


@pytest.fixture(scope="module")
def compound_liquidator(admin, alice, mock_token, mock_ctoken, mock_comptroller):
    with boa.env.prank(admin):
        contract = COMPOUND_LIQUIDATOR_DEPLOYER.deploy(
            mock_token.address,
            mock_ctoken.address,
            mock_comptroller.address,
        )

    mock_token.mint(alice, FUND_AMOUNT)
    with boa.env.prank(alice):
        mock_token.approve(contract.address, FUND_AMOUNT)

    return contract
