"""CheckConfig: command-line options for the JSON checker.

This schema handles command-line arguments parsed by argparse. Paths are kept
as strings; the runner opens them.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator

from mycoassert.schemas.base import MycoBaseModel


class CheckConfig(MycoBaseModel):
    """Options for one ``mycoassert-check`` run.

    Usage
    -----
        config = CheckConfig(
            data_path="user.json",
            schema_path="user.schema.json",
            named_schemas_path="types.json",
        )
        exit_code = run_check(config)

        # Contract mode: data is a context object, schema is a contract
        config = CheckConfig(mode="contract", data_path="ctx.json", schema_path="contract.json")
    """

    mode: Literal["assert", "contract"] = "assert"
    data_path: str
    schema_path: str
    named_schemas_path: Optional[str] = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    indent: Optional[int] = Field(default=2, ge=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    @field_validator("mode", mode="before")
    @classmethod
    def normalize_mode(cls, v):
        if isinstance(v, str):
            return v.lower().strip()
        return v
