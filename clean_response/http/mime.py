# (c) Nelen & Schuurmans

import logging
import mimetypes

from ..base.domain import DoesNotExist
from ..base.domain import ValueObject

__all__ = ["MimeOptions", "MimeTypes", "mime_types"]

logger = logging.getLogger(__name__)


class MimeOptions(ValueObject):
    default: str = "application/data"
    custom_types: dict[str, str] = {}


class MimeTypes:
    """Registry of mime types, addressable by short names like "json".

    Custom types take precedence over the types known to the standard library,
    which are looked up by file extension.
    """

    def __init__(self, options: MimeOptions | None = None):
        self.options = options or MimeOptions()
        self.default = self.options.default
        self.custom_types: dict[str, str] = {}
        for name, mime in self.options.custom_types.items():
            self.add_type(name, mime)

    def add_type(self, name: str, mime: str) -> None:
        self.custom_types[name.lower()] = mime

    def add_alias(self, alias: str, orig: str) -> str:
        mime = self.for_name(orig)
        self.add_type(alias, mime)
        return mime

    def for_name(self, name: str) -> str:
        key = name.lower().lstrip(".")
        if key in self.custom_types:
            return self.custom_types[key]
        mime = mimetypes.types_map.get("." + key)
        if mime is None:
            raise DoesNotExist("mime type", id=name)
        return mime

    def name_or_type(self, value: str) -> str:
        if "/" in value:
            return value
        return self.for_name(value)

    def for_file(self, filename: str) -> str:
        _, _, ext = filename.rpartition(".")
        if ext and ext != filename:
            try:
                return self.for_name(ext)
            except DoesNotExist:
                pass
        logger.debug("no mime type for %s, using %s", filename, self.default)
        return self.default


mime_types = MimeTypes()
