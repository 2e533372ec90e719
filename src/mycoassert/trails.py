"""Trail manifest: routing table from URL paths to remotely loaded modules.

Each trail names the module to mount for a path, the global variable the
module exposes once its script has loaded, and the script URL. The manifest
only describes where modules live; fetching them is the host's job.

Raw manifests are asserted with the same engine as any other record, so a bad
entry reports a path such as ``"/register.url"``.
"""

import logging
from collections.abc import Mapping
from typing import Optional

from pydantic import ConfigDict, Field

from mycoassert.assertion import assert_data
from mycoassert.schemas.base import MycoBaseModel

logger = logging.getLogger(__name__)

TRAIL_SCHEMA = {
    "name": {"transform": ["trim"], "type": "string", "minLength": 1},
    "globalVar": {"transform": ["trim"], "type": "string", "pattern": r"^[A-Za-z_$][\w$]*$"},
    "url": {"transform": ["trim"], "type": "string", "pattern": r"^https?://"},
}


class Trail(MycoBaseModel):
    """One routing entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    global_var: str = Field(alias="globalVar")
    url: str


class TrailManifest:
    """Path -> Trail lookup table.

    Parameters
    ----------
    trails : dict
        Path -> Trail mapping. Paths are matched exactly.
    """

    def __init__(self, trails: Optional[dict] = None):
        self._trails: dict[str, Trail] = dict(trails or {})

    @classmethod
    def from_mapping(cls, raw: Mapping) -> "TrailManifest":
        """Build a manifest from raw ``{path: {name, globalVar, url}}`` data.

        Raises
        ------
        ValidationError
            If an entry does not satisfy ``TRAIL_SCHEMA``; ``property`` is
            prefixed with the offending path.
        """
        schema = {}
        if isinstance(raw, Mapping):
            schema = {path: {"properties": TRAIL_SCHEMA} for path in raw}
        sanitized = assert_data(raw, schema)
        trails = {
            path: Trail(name=entry["name"], global_var=entry["globalVar"], url=entry["url"])
            for path, entry in sanitized.items()
        }
        logger.debug("Loaded %d trails", len(trails))
        return cls(trails)

    def resolve(self, path: str) -> Optional[Trail]:
        return self._trails.get(path)

    def paths(self) -> list[str]:
        return list(self._trails)

    def __contains__(self, path: object) -> bool:
        return path in self._trails

    def __len__(self) -> int:
        return len(self._trails)


DEFAULT_TRAILS = {
    "/": {
        "name": "spore-current-user",
        "globalVar": "SporeCurrentUser",
        "url": "http://localhost:5175/spore.js",
    },
    "/register": {
        "name": "spore-user-registration",
        "globalVar": "SporeUserRegistration",
        "url": "http://localhost:5174/spore.js",
    },
}
