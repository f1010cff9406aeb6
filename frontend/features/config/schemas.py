from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ConfigDocument(BaseModel):
    """Shape of config.json.

    Unknown keys are ignored. Missing keys and JSON nulls both decode to None,
    the loader treats them the same as empty strings or mappings.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    redirects: dict[str, str] | None = None
    buckets: dict[str, str] | None = None
    webroot: str | None = None
    index: str | None = None
    hook: str | None = None
    gcs: str | None = None
