# (c) Nelen & Schuurmans

import re
from decimal import Decimal
from http import HTTPStatus

from ..base.domain import BadRequest
from ..base.domain import DoesNotExist

__all__ = ["HTTPStatusResolver", "http_status"]


# shorthands on top of the names in http.HTTPStatus
DEFAULT_ALIASES = {
    "ok": HTTPStatus.OK,
    "error": HTTPStatus.INTERNAL_SERVER_ERROR,
    "not_allowed": HTTPStatus.METHOD_NOT_ALLOWED,
    "moved": HTTPStatus.MOVED_PERMANENTLY,
}


# ascii digits only, optionally signed or with a fraction
NUMBER = re.compile(r"^\s*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)\s*$")


def normalize(name: str) -> str:
    return name.strip().lower().replace(" ", "_").replace("-", "_")


class HTTPStatusResolver:
    """Translate HTTP status names into status codes.

    Names are matched case-insensitively and spaces or dashes may be used
    instead of underscores, so "NOT_FOUND", "not_found" and "Not Found"
    all resolve to 404.
    """

    def __init__(self, aliases: dict[str, int] | None = None):
        self.aliases: dict[str, int] = {}
        for name, code in {**DEFAULT_ALIASES, **(aliases or {})}.items():
            self.add_alias(name, code)

    def add_alias(self, name: str, code: int) -> None:
        self.aliases[normalize(name)] = int(code)

    def status(self, value: int | float | str) -> int:
        if isinstance(value, bool):
            raise BadRequest(f"invalid http status: {value}")
        if isinstance(value, int):
            code = int(value)
        elif isinstance(value, float) or (
            isinstance(value, str) and NUMBER.match(value)
        ):
            number = Decimal(str(value).strip())
            if not number.is_finite() or number != number.to_integral_value():
                raise BadRequest(f"invalid http status: {value}")
            code = int(number)
        else:
            code = self._lookup(value)
        if code <= 0:
            raise BadRequest(f"invalid http status: {value}")
        return code

    def _lookup(self, name: str) -> int:
        key = normalize(str(name))
        if key in self.aliases:
            return self.aliases[key]
        try:
            return HTTPStatus[key.upper()].value
        except KeyError:
            raise DoesNotExist("http status", id=name)

    def message(self, value: int | str) -> str:
        code = self.status(value)
        try:
            return HTTPStatus(code).phrase
        except ValueError:
            raise DoesNotExist("http status", id=code)


http_status = HTTPStatusResolver()
