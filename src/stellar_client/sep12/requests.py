"""SEP-12 request models."""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .kyc_fields import StandardKYCFields

# httpx multipart entries: (name, (filename, content)); a None filename
# renders a plain form field
MultipartParts = List[Tuple[str, Tuple[Optional[str], object]]]


def text_parts(fields: Dict[str, str]) -> MultipartParts:
    return [(name, (None, value)) for name, value in fields.items()]


def file_parts(files: Dict[str, bytes]) -> MultipartParts:
    return [(name, (name, content)) for name, content in files.items()]


class KYCRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    jwt: Optional[str] = Field(
        default=None, exclude=True, description="SEP-10 token sent as a bearer header"
    )

    def form_fields(self) -> Dict[str, str]:
        return {
            key: str(value)
            for key, value in self.model_dump(by_alias=True, exclude_none=True).items()
        }


class GetCustomerInfoRequest(KYCRequest):
    id: Optional[str] = Field(default=None, description="Customer id from a previous PUT")
    account: Optional[str] = None
    memo: Optional[str] = None
    memo_type: Optional[str] = None
    type: Optional[str] = Field(default=None, description="KYC type, e.g. sep31-sender")
    transaction_id: Optional[str] = None
    lang: Optional[str] = None


class PutCustomerInfoRequest(KYCRequest):
    """Customer data upload.

    Text values (identifiers, SEP-09 text fields and ``custom_fields``) and
    binary values (SEP-09 files and ``custom_files``) are sent together as
    one multipart body, text first.
    """

    id: Optional[str] = None
    account: Optional[str] = None
    memo: Optional[str] = None
    memo_type: Optional[str] = None
    type: Optional[str] = None
    transaction_id: Optional[str] = None
    kyc_fields: Optional[StandardKYCFields] = Field(default=None, exclude=True)
    custom_fields: Optional[Dict[str, str]] = Field(default=None, exclude=True)
    custom_files: Optional[Dict[str, bytes]] = Field(default=None, exclude=True)

    def multipart(self) -> MultipartParts:
        fields = self.form_fields()
        files: Dict[str, bytes] = {}
        if self.kyc_fields is not None:
            fields.update(self.kyc_fields.fields())
            files.update(self.kyc_fields.files())
        if self.custom_fields:
            fields.update(self.custom_fields)
        if self.custom_files:
            files.update(self.custom_files)
        return text_parts(fields) + file_parts(files)


class PutCustomerVerificationRequest(KYCRequest):
    id: Optional[str] = None
    verification_fields: Dict[str, str] = Field(
        default_factory=dict,
        exclude=True,
        description="Codes keyed by field, e.g. mobile_number_verification",
    )

    def multipart(self) -> MultipartParts:
        fields = self.form_fields()
        fields.update(self.verification_fields)
        return text_parts(fields)


class PutCustomerCallbackRequest(KYCRequest):
    url: Optional[str] = Field(default=None, description="Callback URL for status changes")
    id: Optional[str] = None
    account: Optional[str] = None
    memo: Optional[str] = None
    memo_type: Optional[str] = None

    def multipart(self) -> MultipartParts:
        return text_parts(self.form_fields())
