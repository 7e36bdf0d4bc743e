import logging

from dock2kube.core.config import ConfigManager, GeneratorConfig


def test_defaults_when_no_file(tmp_path):
    manager = ConfigManager([tmp_path / "missing.yaml"])
    assert manager.config == GeneratorConfig()
    assert manager.loaded_from is None


def test_default_constants():
    config = GeneratorConfig()
    assert (config.service_api_version, config.service_kind) == ("v1", "Service")
    assert (config.workload_api_version, config.workload_kind) == ("apps/v1", "Deployment")
    assert (config.pipeline_api_version, config.pipeline_kind) == ("skaffold/v2beta29", "Config")
    assert config.default_protocol == "TCP"
    assert config.replicas == 1


def test_file_overrides(tmp_path):
    path = tmp_path / ".dock2kube.yaml"
    path.write_text("output_root: /srv/envs\npipeline_api_version: skaffold/v4beta6\n", encoding='utf-8')

    manager = ConfigManager([path])
    assert manager.loaded_from == path
    assert manager.config.output_root == "/srv/envs"
    assert manager.config.pipeline_api_version == "skaffold/v4beta6"
    assert manager.config.service_kind == "Service"


def test_first_existing_file_wins(tmp_path):
    first = tmp_path / "a.yaml"
    second = tmp_path / "b.yaml"
    first.write_text("manifest_filename: k8s.yml\n", encoding='utf-8')
    second.write_text("manifest_filename: other.yml\n", encoding='utf-8')
    assert ConfigManager([first, second]).config.manifest_filename == "k8s.yml"


def test_unknown_keys_warn(tmp_path, caplog):
    path = tmp_path / "c.yaml"
    path.write_text("colour: blue\nreplicas: 1\n", encoding='utf-8')
    with caplog.at_level(logging.WARNING, logger="dock2kube.config"):
        config = ConfigManager([path]).config
    assert config == GeneratorConfig()
    assert "colour" in caplog.text


def test_broken_file_is_skipped(tmp_path, caplog):
    broken = tmp_path / "broken.yaml"
    broken.write_text("output_root: [unclosed\n", encoding='utf-8')
    fallback = tmp_path / "ok.yaml"
    fallback.write_text("output_root: /ok\n", encoding='utf-8')

    with caplog.at_level(logging.WARNING, logger="dock2kube.config"):
        manager = ConfigManager([broken, fallback])
    assert manager.config.output_root == "/ok"
    assert "broken.yaml" in caplog.text


def test_cli_override_beats_file(tmp_path):
    path = tmp_path / "d.yaml"
    path.write_text("output_root: /from-file\n", encoding='utf-8')
    manager = ConfigManager([path])
    assert manager.resolve(output_root="/from-cli").output_root == "/from-cli"
    assert manager.resolve().output_root == "/from-file"
