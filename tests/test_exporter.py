#!/usr/bin/env python3
"""
DOCK2KUBE EXPORTER SUITE
------------------------
Rendered YAML must parse back to the same data with a standard parser,
keep Kubernetes key order, and separate the two manifests with `---`.
"""

from ruamel.yaml import YAML

from dock2kube.core.models import ContainerCommand, EnvVar, PortMapping, Protocol
from dock2kube.generation.exporter import ManifestExporter
from dock2kube.generation.manifests import build_manifests
from dock2kube.generation.skaffold import build_pipeline_descriptor


def make_pair():
    command = ContainerCommand(
        name="api", daemon=True,
        ports=(PortMapping(3000, 3000), PortMapping(5775, 5775, Protocol.UDP)),
        env_vars=(EnvVar("DEBUG", "true"), EnvVar("N", "1")),
        image="myorg/api:latest",
    )
    return build_manifests(command, "api")


def test_manifest_documents_parse_back():
    service, workload = make_pair()
    text = ManifestExporter().export_manifests(service, workload)

    docs = [d for d in YAML(typ='safe').load_all(text) if d is not None]
    assert docs == [service.to_manifest(), workload.to_manifest()]


def test_service_comes_first_with_separator():
    service, workload = make_pair()
    text = ManifestExporter().export_manifests(service, workload)

    head, sep, tail = text.partition("\n---\n")
    assert sep
    assert "kind: Service" in head
    assert "kind: Deployment" in tail
    assert text.count("\n---\n") == 1


def test_key_order_and_headless_marker():
    service, _ = make_pair()
    text = ManifestExporter().export_descriptor(build_pipeline_descriptor("api", "/x/service.yml"))
    lines = [line for line in text.splitlines() if not line.startswith(" ")]
    assert lines == ["apiVersion: skaffold/v2beta29", "kind: Config", "metadata:", "deploy:"]

    service_text = ManifestExporter().export_manifests(service, make_pair()[1]).split("---")[0]
    assert "clusterIP: None" in service_text
    # string "None", not a YAML null
    assert YAML(typ='safe').load(service_text)["spec"]["clusterIP"] == "None"


def test_sequences_are_indented():
    service, workload = make_pair()
    text = ManifestExporter().export_manifests(service, workload)
    assert "\n    - name: p-0\n" in text


def test_output_is_byte_identical_across_runs():
    service, workload = make_pair()
    assert ManifestExporter().export_manifests(service, workload) == \
        ManifestExporter().export_manifests(*make_pair())


def test_empty_port_and_env_lists():
    command = ContainerCommand(name="x", daemon=False, ports=(), env_vars=(), image="nginx")
    service, workload = build_manifests(command, "x")
    text = ManifestExporter().export_manifests(service, workload)
    docs = list(YAML(typ='safe').load_all(text))
    assert docs[0]["spec"]["ports"] == []
    assert docs[1]["spec"]["template"]["spec"]["containers"][0]["env"] == []
