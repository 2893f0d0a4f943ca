from typing import Union

from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import SerializationError


class RequestBody(BaseModel):
    """Base class for structured request payloads."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )

    @classmethod
    def from_json(cls, data: Union[str, bytes]):
        """Load an arbitrary JSON document into the request structure.

        Raises:
            SerializationError: If ``data`` is not valid JSON for this payload.
        """
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise SerializationError(cls.__name__, e) from e
