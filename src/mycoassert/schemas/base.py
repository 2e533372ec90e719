"""Base Pydantic model with strict defaults for mycoassert models.

Compiled schemas and CLI configuration inherit from this base to ensure
consistent validation behavior.
"""

from pydantic import BaseModel, ConfigDict


class MycoBaseModel(BaseModel):
    """Base model for all mycoassert pydantic models.

    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Stores enum members as their values
    """

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
    )
