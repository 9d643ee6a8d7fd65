# (c) Nelen & Schuurmans

from typing import Type
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import ValidationError

from .exceptions import BadRequest

__all__ = ["ValueObject", "Record"]


T = TypeVar("T", bound="ValueObject")


class ValueObject(BaseModel):
    """Immutable model. Copies are made with .update()."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def create(cls: Type[T], **values) -> T:
        try:
            return cls(**values)
        except ValidationError as e:
            raise BadRequest(e)

    def update(self: T, **values) -> T:
        try:
            return self.__class__(**{**self.model_dump(), **values})
        except ValidationError as e:
            raise BadRequest(e)

    def __hash__(self):
        return hash(self.__class__) + hash(tuple(self.__dict__.values()))


R = TypeVar("R", bound="Record")


class Record(BaseModel):
    """Mutable model that is changed in place during its lifetime.

    Every assignment goes through the field validators, so coercion rules
    apply to updates as well as to construction.
    """

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    @classmethod
    def create(cls: Type[R], **values) -> R:
        try:
            return cls(**values)
        except ValidationError as e:
            raise BadRequest(e)
