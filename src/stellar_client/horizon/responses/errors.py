"""Horizon problem documents (RFC 7807 style error bodies)."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import HorizonModel


class ExtrasResultCodes(HorizonModel):
    transaction: Optional[str] = Field(
        default=None, description="Transaction result code, e.g. tx_failed"
    )
    operations: Optional[List[str]] = Field(
        default=None, description="Per operation result codes"
    )


class HorizonErrorResponseExtras(HorizonModel):
    envelope_xdr: Optional[str] = None
    result_xdr: Optional[str] = None
    result_codes: Optional[ExtrasResultCodes] = None
    hash: Optional[str] = None


class HorizonErrorResponse(HorizonModel):
    """Error body returned by Horizon for failed requests."""

    type: Optional[str] = None
    title: Optional[str] = None
    status: Optional[int] = None
    detail: Optional[str] = None
    instance: Optional[str] = None
    extras: Optional[HorizonErrorResponseExtras] = None
    extras_json: Optional[Dict[str, Any]] = None

    @classmethod
    def from_json(cls, data):
        result = cls.model_validate(data)
        if isinstance(data.get("extras"), dict):
            result.extras_json = data["extras"]
        return result
