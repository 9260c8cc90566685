import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_BUNDLED_ABI = Path(__file__).resolve().parent / "identity" / "abi" / "EnclaveIdentityDao.json"

# Identity codec
ENCLAVE_IDENTITY_ABI = os.getenv("ENCLAVE_IDENTITY_ABI", str(_BUNDLED_ABI))
IDENTITY_OUTPUT_DIR = os.getenv("IDENTITY_OUTPUT_DIR", ".")

# Certificate codec
PEM_WARN_TRAILING = os.getenv("PEM_WARN_TRAILING", "true").lower() == "true"

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
