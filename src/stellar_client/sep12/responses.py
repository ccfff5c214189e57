"""SEP-12 response models."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class KYCModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @classmethod
    def from_json(cls, data):
        return cls.model_validate(data)


class GetCustomerInfoField(KYCModel):
    """A field the anchor still needs."""

    type: Optional[str] = Field(default=None, description="string, binary, number or date")
    description: Optional[str] = None
    choices: Optional[List[str]] = None
    optional: bool = False


class GetCustomerInfoProvidedField(GetCustomerInfoField):
    """A field the customer already provided, with its review status."""

    status: Optional[str] = Field(
        default=None, description="ACCEPTED, PROCESSING, REJECTED or VERIFICATION_REQUIRED"
    )
    error: Optional[str] = None


class GetCustomerInfoResponse(KYCModel):
    id: Optional[str] = None
    status: Optional[str] = Field(
        default=None, description="ACCEPTED, PROCESSING, NEEDS_INFO or REJECTED"
    )
    fields: Optional[Dict[str, GetCustomerInfoField]] = None
    provided_fields: Optional[Dict[str, GetCustomerInfoProvidedField]] = None
    message: Optional[str] = None


class PutCustomerInfoResponse(KYCModel):
    id: str


class CustomerFileResponse(KYCModel):
    file_id: str
    content_type: Optional[str] = None
    size: Optional[int] = None
    expires_at: Optional[str] = None
    customer_id: Optional[str] = None


class GetCustomerFilesResponse(KYCModel):
    files: List[CustomerFileResponse] = Field(default_factory=list)
