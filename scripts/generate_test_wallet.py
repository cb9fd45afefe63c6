#!/usr/bin/env python3
"""
Generate a throwaway wallet for local testing.

Usage: from project root:
  python scripts/generate_test_wallet.py >> .env
"""
import sys

from eth_account import Account
from web3 import Web3


def main() -> int:
    account = Account.create()
    print("# Test wallet generated by scripts/generate_test_wallet.py")
    print("# This is a TEST wallet. Do NOT use it with real funds!")
    print(f"WALLET_PRIVATE_KEY={Web3.to_hex(account.key)}")
    print(f"WALLET_PUBLIC_KEY={account.address}")
    print(
        "Get an Etherscan API key at https://etherscan.io/myapikey; "
        "set TOKEN_ADDRESS to any ERC-20 contract address.",
        file=sys.stderr,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
