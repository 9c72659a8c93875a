import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(Path(BASE_DIR, ".env"))

WEB3_PROVIDER_URL = os.getenv("WEB3_PROVIDER_URL", "http://127.0.0.1:8545")

# Keyfile name under ~/.brownie/accounts
DEPLOYER_ACCOUNT = os.getenv("DEPLOYER_ACCOUNT", "babe")
