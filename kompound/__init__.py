from pathlib import Path

CONTRACTS_DIR = Path(__file__).resolve().parent
