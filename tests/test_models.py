"""Tests for model decoding and encoding."""

from typing import List

import pytest

from codeengine_client.decoder import decode, encode
from codeengine_client.exceptions import DecodeError
from codeengine_client.models import (
    AllowedOutboundDestination,
    AllowedOutboundDestinationCidrBlockData,
    AllowedOutboundDestinationList,
    AllowedOutboundDestinationPatch,
    AllowedOutboundDestinationPatchCidrBlockData,
    App,
    AppPatch,
    BasicAuthSecretData,
    ConfigMapList,
    GenericSecretData,
    JobRun,
    Project,
    ProjectList,
    RegistrySecretData,
    Secret,
    SecretList,
    SecretPrototype,
    ServiceAccessSecretData,
    UnknownAllowedOutboundDestination,
    decode_secret_data,
)


class TestDecode:
    """Tests for decode()."""

    def test_absent_and_null_are_distinguishable(self, project_data):
        data = dict(project_data, reason=None)
        del data["crn"]

        project = decode(data, Project)

        assert project.reason is None
        assert project.is_set("reason")
        assert project.crn is None
        assert not project.is_set("crn")

    def test_missing_fields_do_not_fail(self):
        project = decode({}, Project)
        assert project.model_fields_set == set()

    def test_unknown_fields_ignored(self):
        project = decode({"id": "p1", "added_later": {"x": 1}}, Project)
        assert project.id == "p1"

    def test_wrong_type_reports_field_path(self):
        with pytest.raises(DecodeError) as exc_info:
            decode({"projects": [{"name": "ok"}, {"name": 5}]}, ProjectList)

        error = exc_info.value
        assert error.field_path == "projects[1].name"
        assert error.expected == "string_type"

    def test_wrong_type_nested_model(self):
        with pytest.raises(DecodeError) as exc_info:
            decode({"next": "not-an-object"}, ConfigMapList)
        assert exc_info.value.field_path == "next"

    def test_decode_list_type(self, project_data):
        projects = decode([project_data, project_data], List[Project])
        assert [p.id for p in projects] == ["proj-1", "proj-1"]

    def test_nested_resource(self):
        app = decode(
            {
                "name": "web",
                "image_reference": "icr.io/codeengine/helloworld",
                "run_env_variables": [{"type": "literal", "name": "LEVEL", "value": "debug"}],
                "status_details": {"latest_ready_revision": "web-00002"},
            },
            App,
        )
        assert app.run_env_variables[0].value == "debug"
        assert app.status_details.latest_ready_revision == "web-00002"

    def test_job_run_status(self):
        run = decode({"name": "run-1", "status": "completed", "status_details": {"succeeded": 3}}, JobRun)
        assert run.status_details.succeeded == 3
        assert not run.status_details.is_set("failed")


class TestEncode:
    """Tests for encode() and as_patch()."""

    def test_patch_contains_exactly_set_fields(self):
        patch = AppPatch(scale_max_instances=10, run_commands=None)
        assert encode(patch) == {"scale_max_instances": 10, "run_commands": None}
        assert patch.as_patch() == encode(patch)

    def test_empty_patch(self):
        assert encode(AppPatch()) == {}

    def test_plain_values_passed_through(self):
        assert encode({"name": "x"}) == {"name": "x"}
        assert encode(None) is None


class TestAllowedOutboundDestination:
    """Tests for the polymorphic destination models."""

    def test_cidr_block_variant(self):
        destination = decode(
            {"type": "cidr_block", "cidr_block": "10.0.0.0/24", "name": "internal", "entity_tag": "1"},
            AllowedOutboundDestination,
        )
        assert isinstance(destination, AllowedOutboundDestinationCidrBlockData)
        assert destination.cidr_block == "10.0.0.0/24"

    def test_unknown_type_falls_back(self):
        destination = decode(
            {"type": "fqdn", "fqdn": "example.com", "name": "ext"},
            AllowedOutboundDestination,
        )
        assert isinstance(destination, UnknownAllowedOutboundDestination)
        assert destination.type == "fqdn"
        assert destination.model_extra == {"fqdn": "example.com"}

    def test_missing_type_falls_back(self):
        destination = decode({"name": "x"}, AllowedOutboundDestination)
        assert isinstance(destination, UnknownAllowedOutboundDestination)

    def test_list_dispatches_each_item(self):
        result = decode(
            {
                "allowed_outbound_destinations": [
                    {"type": "cidr_block", "cidr_block": "10.0.0.0/24"},
                    {"type": "something_new"},
                ]
            },
            AllowedOutboundDestinationList,
        )
        kinds = [type(d) for d in result.allowed_outbound_destinations]
        assert kinds == [AllowedOutboundDestinationCidrBlockData, UnknownAllowedOutboundDestination]

    def test_patch_variant(self):
        patch = decode({"type": "cidr_block", "cidr_block": "10.1.0.0/16"}, AllowedOutboundDestinationPatch)
        assert isinstance(patch, AllowedOutboundDestinationPatchCidrBlockData)
        assert encode(patch) == {"type": "cidr_block", "cidr_block": "10.1.0.0/16"}


class TestSecretData:
    """Tests for secret data dispatch on the secret format."""

    @pytest.mark.parametrize(
        "secret_format,data,expected",
        [
            ("basic_auth", {"username": "u", "password": "p"}, BasicAuthSecretData),
            ("registry", {"server": "icr.io", "username": "iamapikey"}, RegistrySecretData),
            ("service_access", {"resource_key": {"id": "rk-1"}}, ServiceAccessSecretData),
            ("generic", {"any": "thing"}, GenericSecretData),
            ("brand_new_format", {"any": "thing"}, GenericSecretData),
        ],
    )
    def test_decode_secret_data(self, secret_format, data, expected):
        assert isinstance(decode_secret_data(secret_format, data), expected)

    def test_secret_dispatches_on_format(self):
        secret = decode(
            {"name": "creds", "format": "basic_auth", "data": {"username": "u", "password": "p"}},
            Secret,
        )
        assert isinstance(secret.data, BasicAuthSecretData)
        assert secret.data.username == "u"

    def test_generic_secret_keeps_keys(self):
        secret = decode({"name": "cfg", "format": "generic", "data": {"API_KEY": "k"}}, Secret)
        assert isinstance(secret.data, GenericSecretData)
        assert secret.data.model_extra == {"API_KEY": "k"}

    def test_secret_without_data(self):
        secret = decode({"name": "empty", "format": "generic"}, Secret)
        assert secret.data is None

    def test_secret_list(self):
        result = decode(
            {
                "secrets": [
                    {"name": "a", "format": "tls", "data": {"tls_cert": "CERT"}},
                    {"name": "b", "format": "generic", "data": {"k": "v"}},
                ]
            },
            SecretList,
        )
        assert result.secrets[0].data.tls_cert == "CERT"
        assert result.secrets[1].data.model_extra == {"k": "v"}

    def test_wrong_data_shape_fails(self):
        with pytest.raises(DecodeError) as exc_info:
            decode({"format": "basic_auth", "data": {"username": 5}}, Secret)
        assert exc_info.value.field_path.startswith("data")

    def test_prototype_encodes_concrete_data(self):
        prototype = SecretPrototype(
            name="registry-creds",
            format="registry",
            data=RegistrySecretData(server="icr.io", username="iamapikey", password="key"),
        )
        assert encode(prototype) == {
            "name": "registry-creds",
            "format": "registry",
            "data": {"server": "icr.io", "username": "iamapikey", "password": "key"},
        }

    def test_prototype_accepts_dict_data(self):
        prototype = SecretPrototype(name="s", format="ssh_auth", data={"ssh_key": "KEY"})
        assert encode(prototype)["data"] == {"ssh_key": "KEY"}
