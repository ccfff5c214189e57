"""SEP-09 standard KYC fields.

Each group maps snake_case attributes to the SEP-09 wire keys through
pydantic aliases. ``fields()`` returns the text values to send and
``files()`` the binary ones (photos, scanned documents).
"""

from datetime import date
from typing import Any, ClassVar, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


def field_value(value: Any) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


class KYCFieldGroup(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_fields: ClassVar[Tuple[str, ...]] = ()
    nested_groups: ClassVar[Tuple[str, ...]] = ()

    def fields(self, key_prefix: str = "") -> Dict[str, str]:
        """Set text fields keyed by their SEP-09 name."""
        exclude = set(self.file_fields) | set(self.nested_groups)
        values = self.model_dump(by_alias=True, exclude_none=True, exclude=exclude)
        return {key_prefix + key: field_value(value) for key, value in values.items()}

    def files(self) -> Dict[str, bytes]:
        """Set binary fields keyed by their SEP-09 name."""
        if not self.file_fields:
            return {}
        return self.model_dump(
            by_alias=True, exclude_none=True, include=set(self.file_fields)
        )


class FinancialAccountKYCFields(KYCFieldGroup):
    bank_account_type: Optional[str] = Field(default=None, description="checking or savings")
    bank_account_number: Optional[str] = None
    bank_number: Optional[str] = Field(default=None, description="Routing number in the US")
    bank_phone_number: Optional[str] = None
    bank_branch_number: Optional[str] = None
    clabe_number: Optional[str] = Field(default=None, description="Mexican CLABE")
    cbu_number: Optional[str] = Field(default=None, description="Argentinian CBU or CVU")
    cbu_alias: Optional[str] = None
    crypto_address: Optional[str] = None
    crypto_memo: Optional[str] = None


class CardKYCFields(KYCFieldGroup):
    number: Optional[str] = Field(default=None, alias="card.number")
    expiration_date: Optional[str] = Field(
        default=None, alias="card.expiration_date", description="YY-MM"
    )
    cvc: Optional[str] = Field(default=None, alias="card.cvc")
    holder_name: Optional[str] = Field(default=None, alias="card.holder_name")
    network: Optional[str] = Field(
        default=None, alias="card.network", description="Visa, Mastercard, AmEx, ..."
    )
    postal_code: Optional[str] = Field(default=None, alias="card.postal_code")
    country_code: Optional[str] = Field(default=None, alias="card.country_code")
    state_or_province: Optional[str] = Field(default=None, alias="card.state_or_province")
    city: Optional[str] = Field(default=None, alias="card.city")
    address: Optional[str] = Field(default=None, alias="card.address")
    token: Optional[str] = Field(
        default=None, alias="card.token", description="Token from a payment processor"
    )


class NaturalPersonKYCFields(KYCFieldGroup):
    """KYC data of an individual."""

    file_fields: ClassVar[Tuple[str, ...]] = (
        "photo_id_front",
        "photo_id_back",
        "notary_approval_of_photo_id",
        "photo_proof_residence",
        "proof_of_income",
        "proof_of_liveness",
    )
    nested_groups: ClassVar[Tuple[str, ...]] = ("financial_account", "card")

    last_name: Optional[str] = None
    first_name: Optional[str] = None
    additional_name: Optional[str] = None
    address_country_code: Optional[str] = Field(default=None, description="ISO 3166-1 alpha-3")
    state_or_province: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    address: Optional[str] = None
    mobile_number: Optional[str] = Field(default=None, description="E.164 format")
    mobile_number_format: Optional[str] = None
    email_address: Optional[str] = None
    birth_date: Optional[str] = None
    birth_place: Optional[str] = None
    birth_country_code: Optional[str] = None
    tax_id: Optional[str] = None
    tax_id_name: Optional[str] = None
    occupation: Optional[int] = Field(default=None, description="ISCO08 code")
    employer_name: Optional[str] = None
    employer_address: Optional[str] = None
    language_code: Optional[str] = Field(default=None, description="ISO 639-1")
    id_type: Optional[str] = None
    id_country_code: Optional[str] = None
    id_issue_date: Optional[date] = None
    id_expiration_date: Optional[date] = None
    id_number: Optional[str] = None
    photo_id_front: Optional[bytes] = None
    photo_id_back: Optional[bytes] = None
    notary_approval_of_photo_id: Optional[bytes] = None
    ip_address: Optional[str] = None
    photo_proof_residence: Optional[bytes] = None
    sex: Optional[str] = None
    proof_of_income: Optional[bytes] = None
    proof_of_liveness: Optional[bytes] = None
    referral_id: Optional[str] = None
    financial_account: Optional[FinancialAccountKYCFields] = None
    card: Optional[CardKYCFields] = None

    def fields(self, key_prefix: str = "") -> Dict[str, str]:
        result = super().fields(key_prefix)
        if self.financial_account is not None:
            result.update(self.financial_account.fields())
        if self.card is not None:
            result.update(self.card.fields())
        return result


class OrganizationKYCFields(KYCFieldGroup):
    """KYC data of a company. Wire keys carry the ``organization.`` prefix."""

    file_fields: ClassVar[Tuple[str, ...]] = (
        "photo_incorporation_doc",
        "photo_proof_address",
    )
    nested_groups: ClassVar[Tuple[str, ...]] = ("financial_account", "card")

    name: Optional[str] = Field(default=None, alias="organization.name")
    vat_number: Optional[str] = Field(default=None, alias="organization.VAT_number")
    registration_number: Optional[str] = Field(
        default=None, alias="organization.registration_number"
    )
    registration_date: Optional[str] = Field(
        default=None, alias="organization.registration_date"
    )
    registered_address: Optional[str] = Field(
        default=None, alias="organization.registered_address"
    )
    number_of_shareholders: Optional[int] = Field(
        default=None, alias="organization.number_of_shareholders"
    )
    shareholder_name: Optional[str] = Field(
        default=None, alias="organization.shareholder_name"
    )
    photo_incorporation_doc: Optional[bytes] = Field(
        default=None, alias="organization.photo_incorporation_doc"
    )
    photo_proof_address: Optional[bytes] = Field(
        default=None, alias="organization.photo_proof_address"
    )
    address_country_code: Optional[str] = Field(
        default=None, alias="organization.address_country_code"
    )
    state_or_province: Optional[str] = Field(
        default=None, alias="organization.state_or_province"
    )
    city: Optional[str] = Field(default=None, alias="organization.city")
    postal_code: Optional[str] = Field(default=None, alias="organization.postal_code")
    director_name: Optional[str] = Field(default=None, alias="organization.director_name")
    website: Optional[str] = Field(default=None, alias="organization.website")
    email: Optional[str] = Field(default=None, alias="organization.email")
    phone: Optional[str] = Field(default=None, alias="organization.phone")
    financial_account: Optional[FinancialAccountKYCFields] = None
    card: Optional[CardKYCFields] = None

    def fields(self, key_prefix: str = "") -> Dict[str, str]:
        result = super().fields(key_prefix)
        if self.financial_account is not None:
            result.update(self.financial_account.fields("organization."))
        if self.card is not None:
            result.update(self.card.fields())
        return result


class StandardKYCFields(BaseModel):
    natural_person_kyc_fields: Optional[NaturalPersonKYCFields] = None
    organization_kyc_fields: Optional[OrganizationKYCFields] = None

    def fields(self) -> Dict[str, str]:
        result: Dict[str, str] = {}
        for group in (self.natural_person_kyc_fields, self.organization_kyc_fields):
            if group is not None:
                result.update(group.fields())
        return result

    def files(self) -> Dict[str, bytes]:
        result: Dict[str, bytes] = {}
        for group in (self.natural_person_kyc_fields, self.organization_kyc_fields):
            if group is not None:
                result.update(group.files())
        return result
