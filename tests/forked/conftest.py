import os

import boa
import pytest
from kompound.settings import WEB3_PROVIDER_URL


@pytest.fixture(scope="module", autouse=True)
def boa_fork():
    if not os.getenv("WEB3_PROVIDER_URL"):
        pytest.skip("Provider url is not set, add WEB3_PROVIDER_URL param to env")
    boa.fork(WEB3_PROVIDER_URL, allow_dirty=True)
