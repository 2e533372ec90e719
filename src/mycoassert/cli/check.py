"""Check JSON documents against a schema or contract from the command line.

Usage:
    mycoassert-check data.json schema.json
    mycoassert-check data.json schema.json --named-schemas types.json
    mycoassert-check ctx.json contract.json --mode contract

Exit codes: 0 on success, 1 when the data fails the schema, 2 when an input
cannot be read or the schema is malformed.
"""

import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from mycoassert.assertion import assert_data
from mycoassert.contract import verify_contract
from mycoassert.errors import SchemaError, ValidationError
from mycoassert.schemas.config import CheckConfig

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger with a single console handler."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)


def load_json(path: str) -> Any:
    """Load a JSON document.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file is not valid JSON.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    with file_path.open(encoding="utf-8") as fh:
        return json.load(fh)


def run_check(config: CheckConfig, out=None) -> int:
    """Run one check and print its outcome as JSON.

    Parameters
    ----------
    config : CheckConfig
        Validated options.
    out : file-like, optional
        Destination for the JSON report. Defaults to ``sys.stdout``.

    Returns
    -------
    int
        Process exit code.
    """
    out = out or sys.stdout

    try:
        data = load_json(config.data_path)
        schema = load_json(config.schema_path)
        named = load_json(config.named_schemas_path) if config.named_schemas_path else None
    except (OSError, ValueError) as exc:
        logger.error("Cannot read input: %s", exc)
        return EXIT_ERROR

    try:
        if config.mode == "contract":
            verify_contract(data, schema)
            report = {"valid": True}
        else:
            report = {"valid": True, "data": assert_data(data, schema, named)}
    except ValidationError as exc:
        logger.info("Check failed at %s (%s)", exc.property, exc.rule)
        report = {"valid": False, "error": exc.to_dict()}
        json.dump(report, out, indent=config.indent, default=repr)
        out.write("\n")
        return EXIT_INVALID
    except (SchemaError, TypeError, re.error) as exc:
        logger.error("Malformed schema: %s", exc)
        return EXIT_ERROR

    json.dump(report, out, indent=config.indent, default=repr)
    out.write("\n")
    return EXIT_OK


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Validate a JSON document against a mycoassert schema")
    parser.add_argument("data", help="Path to the JSON data (or context) document")
    parser.add_argument("schema", help="Path to the JSON schema (or contract) document")
    parser.add_argument("--named-schemas", help="Path to a JSON table of named schemas")
    parser.add_argument("--mode", choices=["assert", "contract"], default="assert",
                        help="Assert a record (default) or verify a contract")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    parser.add_argument("--indent", type=int, default=2, help="JSON output indentation")
    args = parser.parse_args(argv)

    try:
        config = CheckConfig(
            mode=args.mode,
            data_path=args.data,
            schema_path=args.schema,
            named_schemas_path=args.named_schemas,
            log_level=args.log_level,
            indent=args.indent,
        )
    except PydanticValidationError as exc:
        parser.error(str(exc))

    setup_logging(config.log_level)
    return run_check(config)


if __name__ == "__main__":
    sys.exit(main())
