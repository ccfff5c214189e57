"""SEP-12 KYC service client and SEP-09 field groups."""

from .kyc_fields import (
    CardKYCFields,
    FinancialAccountKYCFields,
    NaturalPersonKYCFields,
    OrganizationKYCFields,
    StandardKYCFields,
)
from .service import KYCService

__all__ = [
    "KYCService",
    "StandardKYCFields",
    "NaturalPersonKYCFields",
    "OrganizationKYCFields",
    "FinancialAccountKYCFields",
    "CardKYCFields",
]
