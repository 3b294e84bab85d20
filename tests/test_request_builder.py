"""Tests for request construction."""

import pytest

from codeengine_client.common import HEADER_NAME_SDK_ANALYTICS
from codeengine_client.exceptions import ValidationError
from codeengine_client.models.apps import AppPatch
from codeengine_client.request_builder import (
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_MERGE_PATCH,
    RequestBuilder,
    clean_query_params,
    merge_headers,
    resolve_path,
)


@pytest.fixture
def builder():
    return RequestBuilder("code_engine")


def lower_keys(headers):
    return {k.lower(): v for k, v in headers.items()}


class TestResolvePath:
    """Tests for placeholder substitution."""

    def test_all_placeholders_resolved(self):
        path = resolve_path(
            "/projects/{project_id}/apps/{app_name}/revisions/{name}",
            {"project_id": "p1", "app_name": "web", "name": "web-00001"},
        )
        assert path == "/projects/p1/apps/web/revisions/web-00001"
        assert "{" not in path and "}" not in path

    def test_values_are_percent_encoded(self):
        path = resolve_path("/projects/{project_id}/apps/{name}", {"project_id": "p1", "name": "a/b c"})
        assert path == "/projects/p1/apps/a%2Fb%20c"

    def test_template_without_placeholders(self):
        assert resolve_path("/projects", None) == "/projects"

    @pytest.mark.parametrize("params", [{}, {"project_id": None}, {"project_id": ""}])
    def test_missing_value_raises(self, params):
        with pytest.raises(ValidationError) as exc_info:
            resolve_path("/projects/{project_id}", params)
        assert "project_id" in exc_info.value.field_errors

    def test_all_missing_parameters_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            resolve_path("/projects/{project_id}/apps/{name}", {})
        assert set(exc_info.value.field_errors) == {"project_id", "name"}


class TestQueryAndHeaders:
    def test_none_values_dropped(self):
        assert clean_query_params({"limit": 10, "start": None}) == {"limit": "10"}

    def test_booleans_rendered_lowercase(self):
        assert clean_query_params({"a": True, "b": False}) == {"a": "true", "b": "false"}

    def test_merge_headers_first_layer_wins_case_insensitively(self):
        merged = merge_headers({"accept": "text/plain"}, {"Accept": "application/json", "X-Other": "1"})
        assert merged == {"accept": "text/plain", "X-Other": "1"}

    def test_merge_headers_skips_none(self):
        assert merge_headers({"X-A": None}, {"X-A": "fallback"}) == {"X-A": "fallback"}


class TestRequestBuilder:
    """Tests for RequestBuilder.build()."""

    def test_build_get(self, builder):
        spec = builder.build(
            "get",
            "/projects/{project_id}/configmaps",
            {"project_id": "abc"},
            {"limit": 1, "start": None},
            operation_id="list_config_maps",
        )
        assert spec.method == "GET"
        assert spec.path == "/projects/abc/configmaps"
        assert spec.query_params == {"limit": "1"}
        assert spec.body is None
        headers = lower_keys(spec.merged_headers())
        assert headers["accept"] == CONTENT_TYPE_JSON
        assert "content-type" not in headers

    def test_sdk_headers(self, builder):
        spec = builder.build("GET", "/projects", operation_id="list_projects")
        headers = lower_keys(spec.merged_headers())
        assert headers["user-agent"].startswith("codeengine-python-sdk/")
        analytics = headers[HEADER_NAME_SDK_ANALYTICS.lower()]
        assert "service_name=code_engine" in analytics
        assert "service_version=V2" in analytics
        assert "operation_id=list_projects" in analytics

    def test_caller_headers_win(self, builder):
        spec = builder.build(
            "GET",
            "/projects",
            headers={"user-agent": "my-agent", "ACCEPT": "application/x-custom"},
        )
        headers = lower_keys(spec.merged_headers())
        assert headers["user-agent"] == "my-agent"
        assert headers["accept"] == "application/x-custom"
        assert len([k for k in spec.merged_headers() if k.lower() == "accept"]) == 1

    def test_body_sets_content_type(self, builder):
        spec = builder.build(
            "PATCH",
            "/projects/{project_id}/apps/{name}",
            {"project_id": "p1", "name": "web"},
            body=AppPatch(scale_min_instances=1),
            content_type=CONTENT_TYPE_MERGE_PATCH,
        )
        assert lower_keys(spec.merged_headers())["content-type"] == CONTENT_TYPE_MERGE_PATCH
        assert spec.has_body

    def test_patch_body_contains_only_set_fields(self, builder):
        patch = AppPatch(scale_min_instances=1, image_secret=None)
        spec = builder.build(
            "PATCH",
            "/projects/{project_id}/apps/{name}",
            {"project_id": "p1", "name": "web"},
            body=patch,
        )
        assert spec.body == {"scale_min_instances": 1, "image_secret": None}

    def test_dict_body_passed_through(self, builder):
        spec = builder.build("POST", "/projects", body={"name": "p"})
        assert spec.body == {"name": "p"}

    def test_no_accept_header(self, builder):
        spec = builder.build("DELETE", "/projects/{project_id}", {"project_id": "p1"}, accept=None)
        assert "accept" not in lower_keys(spec.merged_headers())

    def test_missing_path_param_raises(self, builder):
        with pytest.raises(ValidationError):
            builder.build("GET", "/projects/{project_id}", {})

    def test_idempotent_override_kept(self, builder):
        spec = builder.build("POST", "/projects", body={"name": "p"}, idempotent=True)
        assert spec.idempotent is True
