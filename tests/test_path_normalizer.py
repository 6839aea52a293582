"""Tests for path-level normalization."""

from __future__ import annotations

import pytest

from pathgroup.core.normalize.path_normalizer import (
    PathNormalizer,
    normalize_path,
    split_segments,
)
from pathgroup.models.classification import IdentifierKind, OutputMode
from tests.helpers import CUID, CUID2, NANOID, ULID, UUID

SCENARIOS = [
    (f"/api/v1/users/{UUID}/profile", "/api/v1/users/uuid/profile"),
    ("/api/v1/courts/42/bookings", "/api/v1/courts/numeric_id/bookings"),
    ("/api/v1/bookings/booking-abc-99/details", "/api/v1/bookings/slug/details"),
    ("/api/v1/users/user_42/profile", "/api/v1/users/slug/profile"),
    (
        f"/api/v1/tenants/{UUID}/courts/42/bookings/booking-abc-99",
        "/api/v1/tenants/uuid/courts/numeric_id/bookings/slug",
    ),
    ("/api/v1/users/123", "/api/v1/users/numeric_id"),
    ("/api/v1/123/456/789", "/api/v1/numeric_id/numeric_id/numeric_id"),
    (f"/api/v1/users/{ULID}/profile", "/api/v1/users/ulid/profile"),
    (f"/api/v1/users/{CUID}/profile", "/api/v1/users/cuid/profile"),
    (f"/api/v1/users/{CUID2}/profile", "/api/v1/users/cuid2/profile"),
    (f"/api/v1/users/{NANOID}/profile", "/api/v1/users/nanoid/profile"),
    (f"/api/v1/users/usr:{NANOID}/profile", "/api/v1/users/nanoid/profile"),
    ("/api/v1/users/not_a_prefix_123/profile", "/api/v1/users/slug/profile"),
    ("/api/v1/users/abc/profile", "/api/v1/users/abc/profile"),
    (
        f"/api/v1/123/{UUID}/{ULID}/{CUID}/{CUID2}/{NANOID}",
        "/api/v1/numeric_id/uuid/ulid/cuid/cuid2/nanoid",
    ),
    ("/v1/matches/by_created_at/2026-02-26", "/v1/matches/by_created_at/iso_date"),
    ("/v1/matches/by_created_at/2026-02-26T00:01:55.123Z", "/v1/matches/by_created_at/iso_date"),
    ("/v1/matches/by_created_at/date:2026-02-26", "/v1/matches/by_created_at/iso_date"),
    (f"/v1/matches/{UUID}/by_created_at/2026-02-26T00:01:55", "/v1/matches/uuid/by_created_at/iso_date"),
    ("/documentation/swagger-ui/swagger-ui/index.html", "/documentation/swagger-ui/swagger-ui/file"),
    ("/documentation/img/logo_playtomic_rgb.png", "/documentation/img/file"),
    ("/static/js/app.min.js", "/static/js/file"),
    ("/api/docs/swagger-ui-bundle.js", "/api/docs/file"),
    (f"/api/v1/users/{UUID}/avatar.png", "/api/v1/users/uuid/file"),
    ("/static/css/style.css/js/app.js", "/static/css/file/js/file"),
    ("/files/2024/report.pdf", "/files/numeric_id/file"),
    ("/api/match_recommendations", "/api/match_recommendations"),
]


class TestNormalize:
    """Concrete paths collapse to labelled templates."""

    @pytest.mark.parametrize(("path", "expected"), SCENARIOS)
    def test_scenario(self, normalizer: PathNormalizer, path: str, expected: str) -> None:
        assert normalizer.normalize(path) == expected

    @pytest.mark.parametrize(("path", "expected"), SCENARIOS)
    def test_idempotent(self, normalizer: PathNormalizer, path: str, expected: str) -> None:
        once = normalizer.normalize(path)
        assert normalizer.normalize(once) == once == expected

    def test_module_level_helper(self) -> None:
        assert normalize_path("/api/v1/courts/42/bookings") == "/api/v1/courts/numeric_id/bookings"

    @pytest.mark.parametrize(
        "path",
        [
            "/api/v1/users/profile",
            "/api/users/profile",
            "/health",
            "/api/p/csr/content_types/product_page_blurbs/entries",
        ],
    )
    def test_literal_paths_unchanged(self, normalizer: PathNormalizer, path: str) -> None:
        assert normalizer.normalize(path) == path


class TestSlashes:
    """Empty segments and root handling."""

    def test_empty(self, normalizer: PathNormalizer) -> None:
        assert normalizer.normalize("") == ""

    def test_root(self, normalizer: PathNormalizer) -> None:
        assert normalizer.normalize("/") == "/"

    def test_only_slashes(self, normalizer: PathNormalizer) -> None:
        assert normalizer.normalize("///") == "/"

    def test_repeated_and_trailing_slashes(self, normalizer: PathNormalizer) -> None:
        assert normalizer.normalize("//api//users///123/") == "/api/users/numeric_id"

    def test_missing_leading_slash(self, normalizer: PathNormalizer) -> None:
        assert normalizer.normalize("api/users/42") == "/api/users/numeric_id"

    def test_split_segments(self) -> None:
        assert split_segments("//a///b/") == ["a", "b"]
        assert split_segments("") == []


class TestWildcardMode:
    """The legacy scheme replaces UUIDs, numbers and slugs with ``*``."""

    def test_replaces_with_star(self, wildcard_normalizer: PathNormalizer) -> None:
        path = f"/api/v1/tenants/{UUID}/courts/42/bookings/booking-abc-99"
        assert wildcard_normalizer.normalize(path) == "/api/v1/tenants/*/courts/*/bookings/*"

    def test_ignores_newer_kinds(self, wildcard_normalizer: PathNormalizer) -> None:
        assert wildcard_normalizer.normalize("/static/js/app.min.js") == "/static/js/app.min.js"
        assert wildcard_normalizer.normalize(f"/users/{ULID}") == f"/users/{ULID}"

    def test_root(self, wildcard_normalizer: PathNormalizer) -> None:
        assert wildcard_normalizer.normalize("/") == "/"

    def test_idempotent(self, wildcard_normalizer: PathNormalizer) -> None:
        once = wildcard_normalizer.normalize("/users/42/orders/ord-2024-1")
        assert once == "/users/*/orders/*"
        assert wildcard_normalizer.normalize(once) == once

    def test_mode_from_string(self) -> None:
        assert PathNormalizer(mode="wildcard").mode is OutputMode.WILDCARD

    def test_unknown_mode_rejected(self) -> None:
        with pytest.raises(ValueError):
            PathNormalizer(mode="stars")


class TestExplain:
    """explain() exposes the per-segment decisions."""

    def test_segments(self, normalizer: PathNormalizer) -> None:
        explained = normalizer.explain("/api/v1/users/42")

        assert explained.template == "/api/v1/users/numeric_id"
        assert [s.segment for s in explained.segments] == ["api", "v1", "users", "42"]
        assert [s.kind for s in explained.segments] == [
            IdentifierKind.LITERAL,
            IdentifierKind.LITERAL,
            IdentifierKind.LITERAL,
            IdentifierKind.NUMERIC_ID,
        ]
        assert [s.token for s in explained.replaced] == ["numeric_id"]

    def test_wildcard_tokens(self, wildcard_normalizer: PathNormalizer) -> None:
        explained = wildcard_normalizer.explain("/users/42")
        assert explained.mode is OutputMode.WILDCARD
        assert explained.replaced[0].kind is IdentifierKind.NUMERIC_ID
        assert explained.replaced[0].token == "*"

    def test_root_has_no_segments(self, normalizer: PathNormalizer) -> None:
        explained = normalizer.explain("/")
        assert explained.template == "/"
        assert explained.segments == []


class TestNormalizeUrl:
    """normalize_url() drops query strings and fragments."""

    def test_full_url(self, normalizer: PathNormalizer) -> None:
        host, template = normalizer.normalize_url("https://api.example.com/api/v1/users/42?expand=true#top")
        assert host == "api.example.com"
        assert template == "/api/v1/users/numeric_id"

    def test_path_with_query(self, normalizer: PathNormalizer) -> None:
        assert normalizer.normalize_url("/users/42?x=1") == ("", "/users/numeric_id")
