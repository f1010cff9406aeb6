import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from frontend.features.config.validation import decode_config
from frontend.infra.storage import DEFAULT_STORAGE, StorageEndpoint

logger = logging.getLogger(__name__)

# Frontend server config file, relative to the working directory.
CONFIG_FILE = Path("config.json")

DEFAULT_WEB_ROOT = "/"
DEFAULT_HOOK_PATH = "/-/hook/gcs"


@dataclass(frozen=True)
class AppConfig:
    # Permanent redirects keyed by request host+path.
    # Targets must not end with "/" and cannot contain a query string.
    redirects: Mapping[str, str] = field(default_factory=dict)
    # Host to GCS bucket mapping; must contain a "default" key.
    buckets: Mapping[str, str] = field(default_factory=dict)
    web_root: str = DEFAULT_WEB_ROOT  # default handler pattern
    index: str = ""  # dir index file name
    hook_path: str = DEFAULT_HOOK_PATH  # GCS object change notification hook pattern
    gcs_base: str = DEFAULT_STORAGE.base

    def __post_init__(self) -> None:
        object.__setattr__(self, "redirects", MappingProxyType(dict(self.redirects)))
        object.__setattr__(self, "buckets", MappingProxyType(dict(self.buckets)))

    def bucket_for(self, host: str) -> str:
        bucket = self.buckets.get(host) or self.buckets.get("default")
        if bucket is None:
            raise KeyError(f"No bucket for host: {host}")
        return bucket

    def to_document(self) -> dict[str, object]:
        return {
            "redirects": dict(self.redirects),
            "buckets": dict(self.buckets),
            "webroot": self.web_root,
            "index": self.index,
            "hook": self.hook_path,
            "gcs": self.gcs_base,
        }


def load_config(path: Path = CONFIG_FILE, storage: StorageEndpoint = DEFAULT_STORAGE) -> AppConfig:
    """Read path as JSON and return a fully defaulted AppConfig.

    OSError from opening or reading the file propagates unchanged; malformed
    contents raise ConfigDecodeError. Nothing is published on failure.
    """

    with path.open("rb") as f:
        data = f.read()
    doc = decode_config(data)

    web_root = doc.webroot
    if not web_root:
        logger.debug("config: webroot unset, using %s", DEFAULT_WEB_ROOT)
        web_root = DEFAULT_WEB_ROOT
    hook_path = doc.hook
    if not hook_path:
        logger.debug("config: hook unset, using %s", DEFAULT_HOOK_PATH)
        hook_path = DEFAULT_HOOK_PATH
    gcs_base = doc.gcs
    if not gcs_base:
        logger.debug("config: gcs unset, using %s", storage.base)
        gcs_base = storage.base

    cfg = AppConfig(
        redirects=doc.redirects or {},
        buckets=doc.buckets or {},
        web_root=web_root,
        index=doc.index or "",
        hook_path=hook_path,
        gcs_base=gcs_base,
    )
    logger.info("Loaded config from %s (%d buckets, %d redirects)", path, len(cfg.buckets), len(cfg.redirects))
    return cfg
