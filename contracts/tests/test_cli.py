"""Tests for the command line entry point."""

import json

from typer.testing import CliRunner

from contracts.src.main import app

runner = CliRunner()

def test_trusted_images(builder_config_file):
    result = runner.invoke(app, [
        "trusted-images",
        "--config", builder_config_file,
        "--pipeline", "github.com/org/repo",
        "extensions/gke:stable", "golang:1.12", "extensions/gke:dev",
    ])

    assert result.exit_code == 0
    images = json.loads(result.stdout)
    assert [i["path"] for i in images] == ["extensions/gke"]
    assert images[0]["injectedCredentialTypes"] == ["kubernetes-engine"]

def test_credentials_prints_no_secrets(builder_config_file):
    result = runner.invoke(app, [
        "credentials",
        "-c", builder_config_file,
        "-p", "github.com/org/repo",
        "extensions/docker:stable",
    ])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {"name": "container-registry-extensions", "type": "container-registry"},
        {"name": "container-registry-estafette", "type": "container-registry"},
    ]
    assert "secret" not in result.stdout

def test_missing_config(tmp_path):
    result = runner.invoke(app, [
        "credentials",
        "-c", str(tmp_path / "missing.yaml"),
        "-p", "github.com/org/repo",
        "extensions/docker:stable",
    ])

    assert result.exit_code == 2

def test_status_succeeded(tmp_path):
    log = tmp_path / "build-log.json"
    log.write_text(json.dumps({
        "steps": [
            {"step": "build", "status": "FAILED"},
            {"step": "build", "runIndex": 1, "status": "SUCCEEDED"},
            {"step": "deploy", "status": "SKIPPED"},
        ]
    }))

    result = runner.invoke(app, ["status", str(log)])

    assert result.exit_code == 0
    assert result.stdout.strip() == "succeeded"

def test_status_canceled(tmp_path):
    log = tmp_path / "release-log.yaml"
    log.write_text("- step: deploy\n  status: CANCELED\n- step: deploy\n  runIndex: 1\n  status: SUCCEEDED\n")

    result = runner.invoke(app, ["status", str(log)])

    assert result.exit_code == 1
    assert result.stdout.strip() == "canceled"

def test_status_without_steps_is_unknown(tmp_path):
    log = tmp_path / "empty.json"
    log.write_text(json.dumps({"steps": []}))

    result = runner.invoke(app, ["status", str(log)])

    assert result.exit_code == 1
    assert result.stdout.strip() == "unknown"
