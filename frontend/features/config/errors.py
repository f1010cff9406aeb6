from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigIssue:
    code: str
    path: str
    message: str


class ConfigDecodeError(Exception):
    def __init__(self, issues: list[ConfigIssue]):
        super().__init__("config_decode_error")
        self.issues = issues


class ConfigValidationError(Exception):
    def __init__(self, issues: list[ConfigIssue]):
        super().__init__("config_validation_error")
        self.issues = issues
