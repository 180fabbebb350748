"""
Minimal async Solana JSON-RPC client.

Only the calls this package needs are exposed. Account fetching and
subscriptions are left to the caller's own connection layer.
"""

from typing import Optional

import aiohttp


class SolanaRpcClient:
    """
    Simple async Solana RPC client.

    Satisfies the connection capability expected by get_fees().
    """

    def __init__(self, rpc_url: str, timeout: float = 30.0):
        """
        Initialize RPC client.

        Args:
            rpc_url: RPC endpoint URL
            timeout: Total request timeout in seconds
        """
        self.rpc_url = rpc_url
        self.timeout = timeout
        self._request_id = 0

    async def _call(self, method: str, params: Optional[list] = None):
        """Make an RPC call and return its result."""
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "id": self._request_id,
            "method": method,
            "params": params or [],
        }

        async with aiohttp.ClientSession() as session:
            async with session.post(
                self.rpc_url,
                json=payload,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                response.raise_for_status()
                result = await response.json()
                if "error" in result:
                    raise RuntimeError(f"RPC error: {result['error']}")
                return result.get("result")

    async def get_minimum_balance_for_rent_exemption(self, size: int) -> int:
        """Minimum lamports for an account of `size` bytes to be rent exempt."""
        return int(await self._call("getMinimumBalanceForRentExemption", [size]))

    async def get_health(self) -> str:
        """Check node health."""
        return await self._call("getHealth")
