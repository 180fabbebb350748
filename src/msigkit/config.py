"""
Environment configuration.

- MSIGKIT_NETWORK: devnet | mainnet (default: devnet)
- SOLANA_RPC_URL: RPC endpoint, overrides the network default
- MSIGKIT_PROGRAM_ID: multisig program id
- LOG_LEVEL / LOG_FORMAT: read by msigkit.log at import
"""

import os
from dataclasses import dataclass
from pathlib import Path

DEVNET_RPC = "https://api.devnet.solana.com"
MAINNET_RPC = "https://api.mainnet-beta.solana.com"

DEFAULT_PROGRAM_ID = "msigmtwzgXJHj2ext4XJjCDmpbcMuufFb5cHuwg6Xdt"


@dataclass(frozen=True)
class Settings:
    network: str
    rpc_url: str
    program_id: str


def load_env() -> None:
    """Load .env file from the current or parent directories."""
    current = Path.cwd()
    for _ in range(5):  # Check up to 5 parent dirs
        env_file = current / ".env"
        if env_file.exists():
            with open(env_file) as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith("#") and "=" in line:
                        key, value = line.split("=", 1)
                        os.environ.setdefault(key.strip(), value.strip())
            break
        current = current.parent


def rpc_url_for(network: str) -> str:
    return MAINNET_RPC if network in ("mainnet", "mainnet-beta") else DEVNET_RPC


def get_settings() -> Settings:
    """Build settings from the environment."""
    network = (os.getenv("MSIGKIT_NETWORK") or "devnet").strip().lower()
    if network == "mainnet-beta":
        network = "mainnet"
    if network not in ("devnet", "mainnet"):
        raise ValueError(f"Unsupported network: {network}")

    return Settings(
        network=network,
        rpc_url=(os.getenv("SOLANA_RPC_URL") or "").strip() or rpc_url_for(network),
        program_id=(os.getenv("MSIGKIT_PROGRAM_ID") or "").strip() or DEFAULT_PROGRAM_ID,
    )
