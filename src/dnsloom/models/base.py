"""Base Pydantic model for DNSimple API entities.

Field names follow the snake_case keys used on the wire, so each entity
model is also the serialization schema of that entity. ISO-8601 timestamps
are parsed into ``datetime`` values.
"""

from pydantic import BaseModel, ConfigDict


class BaseEntity(BaseModel):
    """A base Pydantic model for DNSimple entities (e.g. domain, zone).

    Extra fields sent by the API are kept on the instance without causing
    validation errors; missing required fields do fail validation.

    Attributes:
        id: The unique identifier for the entity.
    """

    id: int

    model_config = ConfigDict(extra="allow")
