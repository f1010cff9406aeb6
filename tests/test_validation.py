import pytest

from frontend.config import AppConfig
from frontend.features.config.errors import ConfigValidationError
from frontend.features.config.validation import validate_routing


def test_valid_routing_passes() -> None:
    cfg = AppConfig(
        buckets={"default": "b1"},
        redirects={"example.com/old": "https://example.com/new"},
    )

    validate_routing(cfg)


def test_collects_all_issues() -> None:
    cfg = AppConfig(
        buckets={"x.com": "b2"},
        redirects={
            "a.com/": "https://b.com/",
            "c.com/": "https://d.com/page?x=1",
        },
    )

    with pytest.raises(ConfigValidationError) as exc:
        validate_routing(cfg)

    codes = sorted((i.code, i.path) for i in exc.value.issues)
    assert codes == [
        ("missing_default_bucket", "buckets"),
        ("query_string", "redirects.c.com/"),
        ("trailing_slash", "redirects.a.com/"),
    ]
