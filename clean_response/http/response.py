# (c) Nelen & Schuurmans

import json
import logging
from typing import Any

from pydantic import Field
from pydantic import field_validator

from ..base.domain import Json
from ..base.domain import Record
from ..base.domain import ValueObject
from .headers import HeaderCollection
from .mime import mime_types
from .status import http_status

__all__ = ["ForwardTarget", "Response"]

logger = logging.getLogger(__name__)


class ForwardTarget(ValueObject):
    to: str
    params: Json = {}
    options: Json = {}

    def __hash__(self):
        # params and options are dicts; equal dicts may differ in key order
        return hash(self.__class__) + hash(
            json.dumps(self.model_dump(mode="json"), sort_keys=True)
        )


class Response(Record):
    """The response of a single request-response cycle.

    A router creates one instance per request, handlers mutate it in place,
    and the transport layer consumes the output of .render(). The flags
    has_passed, halted and forward_target are advisory: it is up to the
    dispatcher to act on them.

    The status may be assigned as a number or as a name:

    >>> response = Response(status="not found")
    >>> response.status
    404
    """

    status: int = 200
    content: str = ""
    headers: HeaderCollection = Field(default_factory=HeaderCollection)
    has_passed: bool = False
    halted: bool = False
    # content is already transformed (charset, compression); do not encode again
    encoded: bool = False
    forward_target: ForwardTarget | None = None

    @field_validator("status", mode="before")
    @classmethod
    def resolve_status(cls, value: Any) -> int:
        return http_status.status(value)

    @field_validator("headers", mode="before")
    @classmethod
    def coerce_headers(cls, value: Any) -> HeaderCollection:
        if value is None:
            return HeaderCollection()
        if isinstance(value, HeaderCollection):
            return value
        return HeaderCollection(value)

    def set_status_code(self, code: int) -> None:
        self.status = code

    def set_status_name(self, name: str) -> None:
        self.status = name

    @property
    def content_type(self) -> str | None:
        return self.header("Content-Type")

    @content_type.setter
    def content_type(self, value: str) -> None:
        self.set_header("Content-Type", mime_types.name_or_type(value))

    def header(self, name: str) -> str | None:
        return self.headers.header(name)

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def push_header(self, name: str, value: str) -> None:
        self.headers.add(name, value)

    def headers_to_list(self) -> list[str]:
        return self.headers.to_list()

    def pass_route(self) -> None:
        self.has_passed = True

    def exists(self) -> bool:
        return len(self.content) > 0

    def forward(
        self, to: str, params: Json | None = None, options: Json | None = None
    ) -> None:
        logger.debug("forwarding to %s", to)
        self.forward_target = ForwardTarget(
            to=to, params=params or {}, options=options or {}
        )

    def is_forwarded(self) -> ForwardTarget | None:
        return self.forward_target

    def render(self) -> tuple[int, list[str], list[str]]:
        return (self.status, self.headers_to_list(), [self.content])
