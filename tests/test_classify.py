import logging

import pytest

import tfpath
from tfpath import DYNAMIC, CollectionType, PrimitiveType, Scope, classify_desired_type
from tfpath.testing import tfpath_config_env


@pytest.mark.parametrize(
    "path",
    [
        "aws",
        "aws_instance.nonexistent",
        "google.instance.name",
        "aws_instance.tags.name",
        "aws_instance.network_interfaces.unknown",
    ],
)
def test_unresolved_paths_are_dynamic(scope: Scope, path: str) -> None:
    assert classify_desired_type(scope, path) == DYNAMIC
    assert scope.diagnostics == []


def test_primitive_and_complex_types_are_returned(scope: Scope) -> None:
    assert classify_desired_type(scope, "data.aws_ami.id") == PrimitiveType(name="string")
    assert classify_desired_type(scope, "aws_instance.tags") == CollectionType(
        kind="map", element=PrimitiveType(name="string")
    )
    assert classify_desired_type(scope, "aws_instance.tags[]") == PrimitiveType(
        name="string"
    )
    assert classify_desired_type(
        scope, "aws_security_group.ingress.from_port"
    ) == PrimitiveType(name="number")


def test_classified_types_are_the_stored_types(
    scope: Scope, schema: tfpath.ProviderSchema
) -> None:
    stored = schema.provider_schemas[
        "registry.terraform.io/hashicorp/aws"
    ].resource_schemas["aws_instance"].block.attributes["tags"].type

    assert classify_desired_type(scope, "aws.instance.tags") is stored


def test_provider_schema_root_is_dynamic(scope: Scope) -> None:
    assert classify_desired_type(scope, "aws.awsProvider") == DYNAMIC
    assert scope.diagnostics == []


def test_block_is_dynamic_with_diagnostic(
    scope: Scope, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="tfpath"):
        result = classify_desired_type(scope, "aws_instance.root_block_device")

    assert result == DYNAMIC
    assert len(scope.diagnostics) == 1
    diagnostic = scope.diagnostics[0]
    assert diagnostic.path == "aws_instance.root_block_device"
    assert diagnostic.block.max_items == 1
    assert "undetermined type for aws_instance.root_block_device" in caplog.text
    assert "volume_size" in caplog.text


def test_block_diagnostic_uses_configured_level(
    scope: Scope, caplog: pytest.LogCaptureFixture
) -> None:
    with tfpath_config_env():
        tfpath.TFPATH_CONFIG.undetermined_log_level = logging.DEBUG
        with caplog.at_level(logging.INFO, logger="tfpath"):
            classify_desired_type(scope, "aws_instance.ebs_block_device")

    assert caplog.records == []
    assert len(scope.diagnostics) == 1


def test_custom_provider_resolver_on_scope(schema: tfpath.ProviderSchema) -> None:
    aliases = {
        "aws": "registry.terraform.io/hashicorp/aws",
        "amazon": "registry.terraform.io/hashicorp/aws",
    }
    scope = Scope(
        provider_schema=schema,
        provider_resolver=lambda _schema, name: aliases.get(name),
    )

    assert classify_desired_type(scope, "aws.instance.ami") == PrimitiveType(
        name="string"
    )
    # the resource key joins the short name, so "amazon_instance" is not found
    assert classify_desired_type(scope, "amazon.instance.ami") == DYNAMIC

    nothing = Scope(provider_schema=schema, provider_resolver=lambda _schema, _name: None)
    assert classify_desired_type(nothing, "aws.instance.ami") == DYNAMIC


def test_block_diagnostic_logs_terraform_types(
    scope: Scope, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="tfpath"):
        classify_desired_type(scope, "aws_instance.root_block_device.encryption")

    assert '"type": "string"' in caplog.text
    assert '"name"' not in caplog.text
