"""Contract verification for runtime context objects.

A contract lists, per section, the schema a context section must satisfy.
Only the sections ``state``, ``data`` and ``services`` are recognized, and
they are checked in that order. Verification never returns the sanitized
section: it either passes or raises.
"""

import logging
from collections.abc import Mapping
from typing import Any

from mycoassert.assertion import assert_data
from mycoassert.errors import REQUIRED, TYPE, SchemaError, ValidationError

logger = logging.getLogger(__name__)

CONTRACT_SECTIONS = ("state", "data", "services")


def verify_contract(ctx: Any, contract: Mapping) -> bool:
    """Verify that ``ctx`` satisfies ``contract``.

    Parameters
    ----------
    ctx : Mapping
        Context object provided by the host.
    contract : Mapping
        Section name -> schema. Sections set to ``None`` or left out are
        not checked. Contracts are self-contained: ``type`` cannot
        reference named schemas.

    Returns
    -------
    bool
        Always ``True``; failures raise.

    Raises
    ------
    ValidationError
        ``required`` with ``property`` set to the section name when a
        section demanded by the contract is missing from ``ctx`` or set to
        ``None``, or the
        first assertion failure inside a section.

    Examples
    --------
    >>> verify_contract({"state": {"x": 1}}, {"state": {"x": {"type": "number"}}})
    True
    """
    if not isinstance(contract, Mapping):
        raise SchemaError(f"Contract must be a mapping, got {type(contract).__name__}")
    if not isinstance(ctx, Mapping):
        raise ValidationError(
            "Contract verification failed: context must be a non-null object.",
            rule=TYPE,
        )

    for section in CONTRACT_SECTIONS:
        section_schema = contract.get(section)
        if section_schema is None:
            continue

        if ctx.get(section) is None:
            raise ValidationError(
                f"Contract requires a '{section}' section, but it's missing from the context.",
                property=section,
                rule=REQUIRED,
            )

        assert_data(ctx[section], section_schema)
        logger.debug("Contract section satisfied: %s", section)

    return True
