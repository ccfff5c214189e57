"""Horizon query encodings of ``stellar_sdk.Asset``.

The canonical string form is ``native`` for lumens and ``CODE:ISSUER`` for
credit assets, as used by Horizon's ``asset`` and ``reserves`` query
parameters.
"""

from typing import Dict, Iterable

from stellar_sdk import Asset

__all__ = [
    "ASSET_TYPE_NATIVE",
    "ASSET_TYPE_POOL_SHARE",
    "ASSET_QUERY_KEYS",
    "Asset",
    "asset_from_canonical",
    "asset_query_params",
    "canonical_form",
    "canonical_list",
]

ASSET_TYPE_NATIVE = "native"
ASSET_TYPE_POOL_SHARE = "liquidity_pool_shares"

ASSET_QUERY_KEYS = ("asset_type", "asset_code", "asset_issuer")


def canonical_form(asset: Asset) -> str:
    if asset.is_native():
        return ASSET_TYPE_NATIVE
    return f"{asset.code}:{asset.issuer}"


def asset_from_canonical(value: str) -> Asset:
    """Parse ``native`` or ``CODE:ISSUER``.

    Raises:
        ValueError: If the value has neither form, or the code or issuer is
            rejected by ``stellar_sdk.Asset``
    """
    if value == ASSET_TYPE_NATIVE:
        return Asset.native()
    parts = value.split(":")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValueError(f"invalid canonical asset: {value!r}")
    return Asset(parts[0], parts[1])


def asset_query_params(asset: Asset, prefix: str = "") -> Dict[str, str]:
    """Encode as ``<prefix>asset_type`` plus code and issuer for credit assets."""
    params = {f"{prefix}asset_type": asset.type}
    if not asset.is_native():
        params[f"{prefix}asset_code"] = asset.code
        params[f"{prefix}asset_issuer"] = str(asset.issuer)
    return params


def canonical_list(assets: Iterable[Asset]) -> str:
    """Join assets into Horizon's comma separated list form."""
    return ",".join(canonical_form(asset) for asset in assets)
