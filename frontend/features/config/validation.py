from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from frontend.features.config.errors import (
    ConfigDecodeError,
    ConfigIssue,
    ConfigValidationError,
)
from frontend.features.config.schemas import ConfigDocument

if TYPE_CHECKING:
    from frontend.config import AppConfig

logger = logging.getLogger(__name__)


def _to_issues(e: ValidationError) -> list[ConfigIssue]:
    issues: list[ConfigIssue] = []
    for err in e.errors():
        loc = err.get("loc") or []
        path = ".".join(str(p) for p in loc)
        issues.append(
            ConfigIssue(
                code=str(err.get("type") or "decode_error"),
                path=path,
                message=str(err.get("msg") or "invalid"),
            )
        )
    return issues


def decode_config(data: bytes) -> ConfigDocument:
    try:
        return ConfigDocument.model_validate_json(data)
    except ValidationError as e:
        raise ConfigDecodeError(_to_issues(e)) from e


def validate_routing(cfg: AppConfig) -> None:
    """Check the bucket and redirect conventions downstream handlers rely on.

    Every violation is collected before raising, so one start-up attempt
    reports all of them.
    """

    issues: list[ConfigIssue] = []
    if "default" not in cfg.buckets:
        issues.append(
            ConfigIssue(
                code="missing_default_bucket",
                path="buckets",
                message='buckets must contain a "default" entry',
            )
        )
    for key, target in cfg.redirects.items():
        if target.endswith("/"):
            issues.append(
                ConfigIssue(
                    code="trailing_slash",
                    path=f"redirects.{key}",
                    message=f"redirect target must not end with '/': {target}",
                )
            )
        if "?" in target:
            issues.append(
                ConfigIssue(
                    code="query_string",
                    path=f"redirects.{key}",
                    message=f"redirect target must not contain a query string: {target}",
                )
            )
    if issues:
        for issue in issues:
            logger.error("config %s: %s", issue.path, issue.message)
        raise ConfigValidationError(issues)
