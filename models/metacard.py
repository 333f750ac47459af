"""
Metacard Models
Unmarked Metacard Rejection Plugin

Pydantic models for catalog records (metacards) and their attributes.
Attribute keys follow the catalog's security schema.
"""

import uuid
from enum import StrEnum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field

# =============================================================================
# ENUMERATIONS
# =============================================================================

class SecurityAttribute(StrEnum):
    """Security marking attribute keys."""

    CLASSIFICATION = "security.classification"
    CLASSIFICATION_SYSTEM = "security.classification-system"
    CODEWORDS = "security.codewords"
    DISSEMINATION_CONTROLS = "security.dissemination-controls"
    OWNER_PRODUCER = "security.owner-producer"
    RELEASABILITY = "security.releasability"


# =============================================================================
# ATTRIBUTES
# =============================================================================

class Attribute(BaseModel):
    """A named attribute holding zero or more values."""

    name: str = Field(..., description="Attribute key")
    values: list[Any] = Field(default_factory=list)

    @property
    def value(self) -> Any:
        """First value, or None when the attribute holds nothing."""
        return self.values[0] if self.values else None


def is_attribute_completely_null(attribute: Attribute | None) -> bool:
    """Check whether an attribute is missing or carries no usable value."""
    if attribute is None:
        return True

    value = attribute.value
    if value is None:
        return True

    if isinstance(value, (str, list, tuple, set, dict)) and len(value) == 0:
        return True

    return False


# =============================================================================
# METACARDS
# =============================================================================

@runtime_checkable
class MetacardLike(Protocol):
    """Anything that can look up an attribute by name."""

    def get_attribute(self, name: str) -> Attribute | None:
        ...


class Metacard(BaseModel):
    """A catalog record carrying named attributes."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    attributes: dict[str, Attribute] = Field(default_factory=dict)

    @classmethod
    def from_values(cls, values: dict[str, Any], **kwargs) -> "Metacard":
        """
        Build a metacard from a plain mapping.

        A value of None leaves an attribute with no values; lists become
        multi-valued attributes.

        Usage:
            Metacard.from_values({SecurityAttribute.CLASSIFICATION: "S"})
        """
        metacard = cls(**kwargs)
        for name, value in values.items():
            if value is None:
                metacard.attributes[str(name)] = Attribute(name=str(name))
            elif isinstance(value, (list, tuple)):
                metacard.set_attribute(name, *value)
            else:
                metacard.set_attribute(name, value)
        return metacard

    def get_attribute(self, name: str) -> Attribute | None:
        return self.attributes.get(str(name))

    def set_attribute(self, name: str, *values: Any) -> None:
        self.attributes[str(name)] = Attribute(name=str(name), values=list(values))
