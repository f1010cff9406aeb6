from dataclasses import dataclass
from urllib.parse import quote


@dataclass(frozen=True)
class StorageEndpoint:
    base: str

    def object_url(self, bucket: str, name: str) -> str:
        return f"{self.base.rstrip('/')}/{bucket}/{quote(name.lstrip('/'))}"


DEFAULT_STORAGE = StorageEndpoint(base="https://storage.googleapis.com")
