import pytest

from contracts.src.services.config_loader import parse_builder_config

BUILDER_CONFIG_YAML = """
credentials:
- name: container-registry-extensions
  type: container-registry
  repository: extensions
  username: username
  password: secret
- name: container-registry-estafette
  type: container-registry
  repository: estafette
  username: username
  password: secret
- name: gke-estafette-production
  type: kubernetes-engine
  project: estafette-production
  region: europe-west2
  cluster: production-europe-west2
  defaultNamespace: estafette
  serviceAccountKeyfile: '{}'
- name: gke-estafette-development
  type: kubernetes-engine
  project: estafette-development
  region: europe-west2
  cluster: development-europe-west2
  defaultNamespace: estafette
  serviceAccountKeyfile: '{}'
- name: bitbucket-api-token
  type: bitbucket-api-token
  token: sometoken
- name: github-api-token
  type: github-api-token
  token: sometoken
- name: slack-webhook
  type: slack-webhook
  webhook: somewebhookurl

trustedImages:
- path: extensions/docker
  runDocker: true
  injectedCredentialTypes:
  - container-registry
- path: extensions/gke
  injectedCredentialTypes:
  - kubernetes-engine
- path: extensions/bitbucket-status
  injectedCredentialTypes:
  - bitbucket-api-token
- path: extensions/github-status
  injectedCredentialTypes:
  - github-api-token
- path: extensions/slack-build-status
  injectedCredentialTypes:
  - slack-webhook
- path: docker
  runDocker: true
- path: multiple-git-sources-test
  allowCommands: true
  injectedCredentialTypes:
  - bitbucket-api-token
  - github-api-token
- path: estafette/estafette-ci-builder
  runPrivileged: true
"""

@pytest.fixture
def builder_config():
    return parse_builder_config(BUILDER_CONFIG_YAML)

@pytest.fixture
def builder_config_file(tmp_path):
    path = tmp_path / "builder-config.yaml"
    path.write_text(BUILDER_CONFIG_YAML)
    return str(path)
