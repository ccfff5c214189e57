"""StrKey handling for the Stellar identifiers Horizon accepts as hex.

Horizon expects liquidity pool and claimable balance ids as hex, so ``L...``
and ``B...`` ids are decoded with ``stellar_sdk.StrKey`` before building URLs.
"""

from stellar_sdk import StrKey

# 4 byte XDR discriminant + 32 byte hash
CLAIMABLE_BALANCE_HEX_LENGTH = 72


def decode_liquidity_pool_id_hex(pool_id: str) -> str:
    """``L...`` -> 64 char hex pool id."""
    return StrKey.decode_liquidity_pool(pool_id).hex()


def decode_claimable_balance_id_hex(balance_id: str) -> str:
    """``B...`` -> hex balance id as Horizon prints it.

    The StrKey payload carries a one byte id type, Horizon prints the four
    byte XDR discriminant instead.
    """
    raw = StrKey.decode_claimable_balance(balance_id)
    return raw.hex().rjust(CLAIMABLE_BALANCE_HEX_LENGTH, "0")


def is_valid_account_id(account_id: str) -> bool:
    return StrKey.is_valid_ed25519_public_key(account_id)


def liquidity_pool_id_hex(pool_id: str) -> str:
    """Accept either a hex or an ``L...`` pool id."""
    if pool_id.startswith("L"):
        return decode_liquidity_pool_id_hex(pool_id)
    return pool_id


def claimable_balance_id_hex(balance_id: str) -> str:
    """Accept either a hex or a ``B...`` claimable balance id."""
    if balance_id.startswith("B"):
        return decode_claimable_balance_id_hex(balance_id)
    return balance_id
