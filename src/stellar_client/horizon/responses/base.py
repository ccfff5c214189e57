"""Base models shared by all Horizon responses."""

from typing import Any, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field

ModelT = TypeVar("ModelT", bound="HorizonModel")
ResponseT = TypeVar("ResponseT", bound="Response")


class HorizonModel(BaseModel):
    """Base for every record parsed from Horizon or anchor JSON.

    Unknown keys are ignored and absent keys keep their defaults, so a record
    only ever carries what the server actually sent. Attribute names are the
    snake_case wire names unless an alias says otherwise. Numbers sent
    where a string is declared are accepted, Horizon is not consistent
    about quoting amounts and counts across versions.
    """

    model_config = ConfigDict(
        extra="ignore", populate_by_name=True, coerce_numbers_to_str=True
    )

    @classmethod
    def from_json(cls: Type[ModelT], data: Mapping[str, Any]) -> ModelT:
        return cls.model_validate(data)


class Link(HorizonModel):
    href: Optional[str] = None
    templated: Optional[bool] = None


class PagingLinks(HorizonModel):
    self_link: Optional[Link] = Field(default=None, alias="self")
    next: Optional[Link] = None
    prev: Optional[Link] = None


class Price(HorizonModel):
    """Rational price as numerator and denominator."""

    n: int
    d: int

    def __float__(self) -> float:
        return self.n / self.d


class Response(HorizonModel):
    """Top level Horizon response carrying the server's rate limit headers."""

    rate_limit_limit: Optional[int] = None
    rate_limit_remaining: Optional[int] = None
    rate_limit_reset: Optional[int] = None

    def set_headers(self, headers: Mapping[str, str]) -> None:
        self.rate_limit_limit = _int_header(headers, "X-Ratelimit-Limit")
        self.rate_limit_remaining = _int_header(headers, "X-Ratelimit-Remaining")
        self.rate_limit_reset = _int_header(headers, "X-Ratelimit-Reset")

    @classmethod
    def from_response(
        cls: Type[ResponseT],
        response: httpx.Response,
        http_client: Optional[httpx.Client] = None,
    ) -> ResponseT:
        """Parse an HTTP response body and its rate limit headers."""
        result = cls.from_json(response.json())
        result.set_headers(response.headers)
        return result


def _int_header(headers: Mapping[str, str], name: str) -> Optional[int]:
    value = headers.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None

