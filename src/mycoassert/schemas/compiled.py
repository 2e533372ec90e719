"""Compiled schema models.

A raw schema mixes reserved keys (``transform``, ``type``, ``properties``)
with arbitrary rule names in one mapping. Compilation splits every property
rule set into a tagged structure once, so the assertion engine never has to
re-inspect keys while walking data.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import ConfigDict, Field

from mycoassert.schemas.base import MycoBaseModel


class Nesting(str, Enum):
    """How a property descends into a sub-schema.

    NONE: plain property, only rules apply
    REFERENCE: ``type`` names an entry of the named-schemas table; the named
        schema replaces every sibling rule
    INLINE: ``properties`` holds a sub-schema; sibling rules still apply
    """
    NONE = "none"
    REFERENCE = "reference"
    INLINE = "inline"


class PropertyRuleSet(MycoBaseModel):
    """One schema entry after compilation."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Schema key as written, including any '?' marker")
    name: str = Field(description="Property name with the optional marker stripped")
    optional: bool = False
    transform: tuple[str, ...] = ()
    nesting: Nesting = Nesting.NONE
    reference: Optional[str] = None
    inline: Optional["CompiledSchema"] = None
    rules: dict[str, Any] = Field(default_factory=dict)


class CompiledSchema(MycoBaseModel):
    """Ordered sequence of compiled property rule sets."""

    model_config = ConfigDict(frozen=True)

    properties: tuple[PropertyRuleSet, ...] = ()

    def names(self) -> list[str]:
        return [prop.name for prop in self.properties]


PropertyRuleSet.model_rebuild()
