"""Paged collection responses (HAL ``_links`` + ``_embedded.records``)."""

from typing import Any, Generic, List, Optional, TypeVar

import httpx
from pydantic import Field, PrivateAttr, model_validator

from ..http import execute_request, parse_response
from .base import PagingLinks, Response

RecordT = TypeVar("RecordT")


class Page(Response, Generic[RecordT]):
    """One page of a Horizon collection.

    Horizon does not page on its own; callers walk the collection with
    ``get_next_page`` / ``get_previous_page`` which follow the ``next`` and
    ``prev`` links through the same HTTP client that fetched this page.
    """

    links: Optional[PagingLinks] = Field(default=None, alias="_links")
    records: List[RecordT] = Field(default_factory=list)

    _http_client: Optional[httpx.Client] = PrivateAttr(default=None)

    @model_validator(mode="before")
    @classmethod
    def lift_embedded_records(cls, data: Any) -> Any:
        if isinstance(data, dict) and "records" not in data:
            embedded = data.get("_embedded")
            if isinstance(embedded, dict) and "records" in embedded:
                data = dict(data)
                data["records"] = embedded["records"]
        return data

    @classmethod
    def from_response(cls, response, http_client=None):
        page = super().from_response(response, http_client)
        page._http_client = http_client
        return page

    def _link_href(self, name: str) -> Optional[str]:
        if self.links is None:
            return None
        link = getattr(self.links, name)
        if link is None or not link.href:
            return None
        return link.href

    def has_next_page(self) -> bool:
        return self._link_href("next") is not None

    def has_prev_page(self) -> bool:
        return self._link_href("prev") is not None

    def get_next_page(self):
        """Fetch the next page, or None when there is no next link."""
        return self._follow(self._link_href("next"))

    def get_previous_page(self):
        """Fetch the previous page, or None when there is no prev link."""
        return self._follow(self._link_href("prev"))

    def _follow(self, url: Optional[str]):
        if url is None:
            return None
        if self._http_client is None:
            raise RuntimeError("page was not fetched through an HTTP client")

        response = execute_request(self._http_client, url)
        return parse_response(type(self), response, url, self._http_client)
