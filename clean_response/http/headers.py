# (c) Nelen & Schuurmans

from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from typing import Union

__all__ = ["HeaderCollection"]


HeadersInput = Union["HeaderCollection", Mapping[str, str], Iterable[tuple[str, str]]]


class HeaderCollection:
    """
    A collection class for HTTP Headers. This class combines aspects of a list
    and a dict. Lookup is always case-insensitive. A name can be added multiple
    times with different values, and all of those values will be kept in the
    order they were added.
    """

    def __init__(self, headers: HeadersInput | None = None, **kwargs: str):
        self.headers: list[tuple[str, str]] = []
        if isinstance(headers, HeaderCollection):
            headers = headers.items()
        elif isinstance(headers, Mapping):
            headers = headers.items()
        for name, value in headers or ():
            self.add(name, value)
        for name, value in kwargs.items():
            self.add(name, value)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        lower = name.lower()
        return any(header[0].lower() == lower for header in self.headers)

    def __len__(self) -> int:
        return len(self.headers)

    def __getitem__(self, name: str) -> str:
        for value in self.find_all(name):
            return value
        raise KeyError(name)

    def __setitem__(self, name: str, value: str) -> None:
        """Replace all values of a header, keeping the position of the first."""
        lower = name.lower()
        for i, header in enumerate(self.headers):
            if header[0].lower() == lower:
                self.headers[i] = (header[0], str(value))
                self.headers = self.headers[: i + 1] + [
                    h for h in self.headers[i + 1 :] if h[0].lower() != lower
                ]
                return
        self.add(name, value)

    def __delitem__(self, name: str) -> None:
        if name not in self:
            raise KeyError(name)
        self.delete_all(name)

    def __iter__(self) -> Iterator[str]:
        for header in self.headers:
            yield header[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeaderCollection):
            return NotImplemented
        return self.headers == other.headers

    def add(self, name: str, value: str) -> None:
        self.headers.append((name, str(value)))

    def find_all(self, name: str) -> Iterator[str]:
        lower = name.lower()
        for header in self.headers:
            if header[0].lower() == lower:
                yield header[1]

    def delete_all(self, name: str) -> None:
        lower = name.lower()
        self.headers = [header for header in self.headers if header[0].lower() != lower]

    def get(self, name: str, default: str | None = None) -> str | None:
        if name in self:
            return self[name]
        return default

    def header(self, name: str) -> str | None:
        # multiple values are folded into one, see RFC 9110 section 5.3
        values = list(self.find_all(name))
        if not values:
            return None
        return ", ".join(values)

    def keys(self) -> list[str]:
        return list(self)

    def values(self) -> list[str]:
        return [header[1] for header in self.headers]

    def items(self) -> list[tuple[str, str]]:
        return list(self.headers)

    def copy(self) -> "HeaderCollection":
        return HeaderCollection(self.headers)

    def to_list(self) -> list[str]:
        """Flatten into [name1, value1, name2, value2, ...]"""
        return [part for header in self.headers for part in header]

    def __repr__(self) -> str:
        return f"HeaderCollection({self.headers!r})"
