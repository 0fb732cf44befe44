"""Tests for builder config loading."""

import json

import pytest

from contracts.src.services.config_loader import (
    BuilderConfigError,
    load_builder_config,
    parse_builder_config,
    parse_builder_config_dict,
)

def test_credentials_with_type(builder_config):
    assert [c.type for c in builder_config.credentials] == [
        "container-registry",
        "container-registry",
        "kubernetes-engine",
        "kubernetes-engine",
        "bitbucket-api-token",
        "github-api-token",
        "slack-webhook",
    ]

def test_credentials_with_inline_properties(builder_config):
    registry = builder_config.credentials[0]
    assert registry.properties == {
        "repository": "extensions",
        "username": "username",
        "password": "secret",
    }

    gke = builder_config.credentials[2]
    assert gke.properties["project"] == "estafette-production"
    assert gke.properties["cluster"] == "production-europe-west2"
    assert gke.properties["serviceAccountKeyfile"] == "{}"

def test_trusted_images(builder_config):
    assert len(builder_config.trusted_images) == 8

    docker = builder_config.trusted_images[0]
    assert docker.image_path == "extensions/docker"
    assert docker.run_docker is True
    assert docker.injected_credential_types == ["container-registry"]

    builder = builder_config.trusted_images[7]
    assert builder.image_path == "estafette/estafette-ci-builder"
    assert builder.run_privileged is True
    assert builder.injected_credential_types == []
    assert builder.allowed_pipelines == ""

def test_allow_lists_are_not_inline_properties():
    config = parse_builder_config("""
credentials:
- name: gke-a
  type: kubernetes-engine
  allowedPipelines: github.com/org/repo
  allowedTrustedImages: extensions/gke
  project: production
""")
    credential = config.credentials[0]
    assert credential.allowed_pipelines == "github.com/org/repo"
    assert credential.allowed_trusted_images == "extensions/gke"
    assert credential.properties == {"project": "production"}

def test_legacy_whitelist_keys():
    config = parse_builder_config_dict({
        "credentials": [
            {
                "name": "gke-a",
                "type": "kubernetes-engine",
                "whitelistedPipelines": "github.com/org/.+",
                "whitelistedTrustedImages": "extensions/gke",
            }
        ],
        "trustedImages": [
            {"path": "extensions/gke", "whitelistedPipelines": "github.com/org/repo"}
        ],
    })
    assert config.credentials[0].allowed_pipelines == "github.com/org/.+"
    assert config.credentials[0].allowed_trusted_images == "extensions/gke"
    assert config.credentials[0].properties == {}
    assert config.trusted_images[0].allowed_pipelines == "github.com/org/repo"

def test_json_config_with_additional_properties():
    content = json.dumps({
        "action": "build",
        "track": "dev",
        "git": {
            "repoSource": "github.com",
            "repoOwner": "estafette",
            "repoName": "estafette-ci-contracts",
            "repoBranch": "master",
            "repoRevision": "3adf11c158811dbf0b94ca5bdbbdae79fffe7852",
        },
        "buildVersion": {
            "version": "0.1.67-rc.1",
            "major": 0,
            "minor": 1,
            "patch": "67-rc.1",
            "autoincrement": 67,
        },
        "credentials": [
            {
                "name": "container-registry-extensions",
                "type": "container-registry",
                "additionalProperties": {"repository": "extensions"},
            }
        ],
    })

    config = parse_builder_config(content)

    assert config.action == "build"
    assert config.track == "dev"
    assert config.git.get_full_repo_path() == "github.com/estafette/estafette-ci-contracts"
    assert config.build_version.auto_increment == 67
    assert config.build_version.patch == "67-rc.1"
    assert config.credentials[0].properties == {"repository": "extensions"}

def test_wire_output_uses_aliases(builder_config):
    wire = builder_config.trusted_images[0].to_wire()
    assert wire == {
        "path": "extensions/docker",
        "runPrivileged": False,
        "runDocker": True,
        "allowCommands": False,
        "injectedCredentialTypes": ["container-registry"],
        "allowedPipelines": "",
    }

    credential = builder_config.credentials[4].to_wire()
    assert credential["additionalProperties"] == {"token": "sometoken"}

def test_empty_config():
    with pytest.raises(BuilderConfigError, match="Empty"):
        parse_builder_config("")

def test_invalid_yaml():
    with pytest.raises(BuilderConfigError, match="Invalid YAML"):
        parse_builder_config("credentials: [unclosed")

def test_config_must_be_dictionary():
    with pytest.raises(BuilderConfigError, match="must be a dictionary"):
        parse_builder_config("- just\n- a list\n")

def test_credentials_must_be_list():
    with pytest.raises(BuilderConfigError, match="'credentials' must be a list"):
        parse_builder_config_dict({"credentials": {"name": "x"}})

def test_credential_missing_type():
    with pytest.raises(BuilderConfigError, match="Invalid builder configuration"):
        parse_builder_config_dict({"credentials": [{"name": "x"}]})

def test_load_builder_config(tmp_path):
    path = tmp_path / "builder-config.yaml"
    path.write_text("trustedImages:\n- path: extensions/docker\n  runDocker: true\n")

    config = load_builder_config(str(path))

    assert config.trusted_images[0].run_docker is True
    assert config.credentials == []

def test_load_missing_builder_config(tmp_path):
    with pytest.raises(BuilderConfigError, match="Cannot read builder config"):
        load_builder_config(str(tmp_path / "missing.yaml"))
