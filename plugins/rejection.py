"""
Unmarked Metacard Rejection
Unmarked Metacard Rejection Plugin

Rejects metacards created without security markings. Classification and
owner/producer are always required; classification system, releasability,
codewords and dissemination controls can be required by the operator.
"""

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from models.metacard import MetacardLike, SecurityAttribute, is_attribute_completely_null
from models.operations import CreateRequest
from plugins.access import AccessPlugin, StopProcessing

logger = logging.getLogger(__name__)

REJECT_UNMARKED_ERROR_MESSAGE = "Cannot ingest unmarked data. Security attributes required."


# =============================================================================
# POLICY SETTINGS
# =============================================================================

class MarkingPolicy(BaseModel):
    """Optional marking requirements, all off by default."""

    classification_system_required: bool = Field(
        default=False, alias="classification-system-required"
    )
    releasability_required: bool = Field(default=False, alias="releasability-required")
    codewords_required: bool = Field(default=False, alias="codewords-required")
    dissemination_controls_required: bool = Field(
        default=False, alias="dissemination-controls-required"
    )

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    @classmethod
    def field_for(cls, key: str) -> str | None:
        """Resolve an operator key (alias or field name) to a field name."""
        for name, info in cls.model_fields.items():
            if key in (name, info.alias):
                return name
        return None


# Optional flag -> attribute it guards
OPTIONAL_MARKINGS = {
    "classification_system_required": SecurityAttribute.CLASSIFICATION_SYSTEM,
    "releasability_required": SecurityAttribute.RELEASABILITY,
    "codewords_required": SecurityAttribute.CODEWORDS,
    "dissemination_controls_required": SecurityAttribute.DISSEMINATION_CONTROLS,
}


# =============================================================================
# PLUGIN
# =============================================================================

class UnmarkedMetacardRejectionPlugin(AccessPlugin):
    """
    Access plugin that rejects unmarked metacards on create.

    Usage:
        plugin = UnmarkedMetacardRejectionPlugin()
        plugin.codewords_required = True
        plugin.process_pre_create(request)  # raises StopProcessing
    """

    def __init__(self, policy: MarkingPolicy = None):
        self.policy = policy or MarkingPolicy()

    @classmethod
    def from_config(
        cls,
        config_path: str = "config",
        name: str = "rejectunmarked",
    ) -> "UnmarkedMetacardRejectionPlugin":
        """Build a plugin from a YAML policy file."""
        from plugins.config import load_policy

        return cls(load_policy(config_path, name))

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def classification_system_required(self) -> bool:
        return self.policy.classification_system_required

    @classification_system_required.setter
    def classification_system_required(self, value: bool):
        self.policy.classification_system_required = value

    @property
    def releasability_required(self) -> bool:
        return self.policy.releasability_required

    @releasability_required.setter
    def releasability_required(self, value: bool):
        self.policy.releasability_required = value

    @property
    def codewords_required(self) -> bool:
        return self.policy.codewords_required

    @codewords_required.setter
    def codewords_required(self, value: bool):
        self.policy.codewords_required = value

    @property
    def dissemination_controls_required(self) -> bool:
        return self.policy.dissemination_controls_required

    @dissemination_controls_required.setter
    def dissemination_controls_required(self, value: bool):
        self.policy.dissemination_controls_required = value

    def update(self, properties: dict[str, Any]) -> None:
        """
        Apply operator configuration.

        Keys may be the hyphenated operator names or field names. Unknown
        keys are logged and skipped. Values are validated before any of them
        are applied. Accepted values are written onto the held policy.
        """
        changes = {}
        for key, value in properties.items():
            field = MarkingPolicy.field_for(key)
            if field is None:
                logger.warning(f"Ignoring unknown marking policy key: {key}")
                continue
            changes[field] = value

        merged = {**self.policy.model_dump(), **changes}
        try:
            validated = MarkingPolicy.model_validate(merged)
        except ValidationError:
            logger.error(f"Invalid marking policy configuration: {properties}")
            raise

        for field in changes:
            setattr(self.policy, field, getattr(validated, field))

        logger.info(f"Marking policy updated: {self.policy.model_dump(by_alias=True)}")

    # -------------------------------------------------------------------------
    # Hooks
    # -------------------------------------------------------------------------

    def process_pre_create(self, request: CreateRequest) -> CreateRequest:
        self.check_markings(request.metacards)
        return request

    def check_markings(self, metacards: Iterable[MetacardLike]) -> None:
        """
        Verify every metacard carries the required security markings.

        Stops at the first metacard that fails.

        Raises:
            StopProcessing: if any metacard is missing a required marking
        """
        for metacard in metacards:
            classification = metacard.get_attribute(SecurityAttribute.CLASSIFICATION)
            owner_producer = metacard.get_attribute(SecurityAttribute.OWNER_PRODUCER)

            logger.debug(f"Classification: {classification}")
            logger.debug(f"Owner-Producer: {owner_producer}")

            if (is_attribute_completely_null(classification)
                    or is_attribute_completely_null(owner_producer)):
                self._reject()

            logger.debug("Minimal security requirements were met for the product")

            missing_optional = False
            for flag, key in OPTIONAL_MARKINGS.items():
                attribute = metacard.get_attribute(key)
                logger.debug(f"{key}: {attribute}")
                if getattr(self.policy, flag) and is_attribute_completely_null(attribute):
                    missing_optional = True

            if missing_optional:
                self._reject()

            logger.debug("All security requirements were met for the product")

    def _reject(self):
        logger.info("Rejecting unmarked metacard")
        raise StopProcessing(REJECT_UNMARKED_ERROR_MESSAGE, plugin=type(self).__name__)
