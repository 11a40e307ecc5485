"""Mapper configuration.

MapperConfig is a Pydantic model holding the defaults an ObjectMapper
applies when the caller does not override them per call.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MapperConfig(BaseModel):
    """Configuration for an ObjectMapper."""

    model_config = ConfigDict(frozen=True)

    # Default for the include_children argument of map()/map_async()
    include_children: bool = True
    # Raise AdditionalDataError for names the target has no attribute for;
    # when False such names are skipped with a warning.
    strict_additional_data: bool = True
    # Collapse proxy classes to their declared base before registry lookup
    normalize_proxies: bool = True
