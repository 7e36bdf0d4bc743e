#!/usr/bin/env python3
"""
DOCK2KUBE MANIFEST BUILDER
--------------------------
Derives the Kubernetes Service and Deployment from a ContainerCommand.

Both entities are linked in two ways:
1. Port names: the i-th service port and the i-th container port are both
   named `p-<i>`; the service targets the container port by that name.
2. Labels: service selector, deployment matchLabels and pod template
   labels are all `{app: <name>}`.

Author: Dock2Kube Team
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from dock2kube.core.config import GeneratorConfig
from dock2kube.core.models import ContainerCommand, Protocol


@dataclass(frozen=True)
class ObjectMeta:
    name: str
    labels: Dict[str, str]


@dataclass(frozen=True)
class ServicePort:
    name: str
    port: int
    target_port: str
    protocol: Protocol


@dataclass(frozen=True)
class ServiceManifest:
    api_version: str
    kind: str
    metadata: ObjectMeta
    selector: Dict[str, str]
    ports: Tuple[ServicePort, ...]
    headless: bool = True

    def to_manifest(self) -> Dict[str, Any]:
        spec: Dict[str, Any] = {}
        if self.headless:
            # no virtual IP, routing is by selector only
            spec["clusterIP"] = "None"
        spec["selector"] = dict(self.selector)
        spec["ports"] = [
            {
                "name": p.name,
                "port": p.port,
                "protocol": p.protocol.value,
                "targetPort": p.target_port,
            }
            for p in self.ports
        ]
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": {"name": self.metadata.name, "labels": dict(self.metadata.labels)},
            "spec": spec,
        }


@dataclass(frozen=True)
class ContainerPort:
    name: str
    container_port: int


@dataclass(frozen=True)
class EnvEntry:
    name: str
    value: str


@dataclass(frozen=True)
class ContainerSpec:
    name: str
    image: str
    ports: Tuple[ContainerPort, ...]
    env: Tuple[EnvEntry, ...]


@dataclass(frozen=True)
class PodTemplate:
    labels: Dict[str, str]
    container: ContainerSpec


@dataclass(frozen=True)
class WorkloadManifest:
    api_version: str
    kind: str
    metadata: ObjectMeta
    replicas: int
    match_labels: Dict[str, str]
    template: PodTemplate

    @property
    def container(self) -> ContainerSpec:
        return self.template.container

    def to_manifest(self) -> Dict[str, Any]:
        container = self.template.container
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": {"name": self.metadata.name, "labels": dict(self.metadata.labels)},
            "spec": {
                "replicas": self.replicas,
                "selector": {"matchLabels": dict(self.match_labels)},
                "template": {
                    "metadata": {"labels": dict(self.template.labels)},
                    "spec": {
                        "containers": [
                            {
                                "name": container.name,
                                "image": container.image,
                                "ports": [
                                    {"name": p.name, "containerPort": p.container_port}
                                    for p in container.ports
                                ],
                                "env": [{"name": e.name, "value": e.value} for e in container.env],
                            }
                        ]
                    },
                },
            },
        }


def port_name(index: int) -> str:
    """Synthetic name shared by the service port and container port at `index`."""
    return f"p-{index}"


def build_manifests(command: ContainerCommand, name: str,
                    config: GeneratorConfig = GeneratorConfig()) -> Tuple[ServiceManifest, WorkloadManifest]:
    """
    Pure derivation of (Service, Deployment). Total over a parsed command.

    Args:
        command: The parsed command.
        name: The resolved name (command.name or a generated identifier).
        config: Schema identifiers and fixed values.
    """
    labels = {config.label_key: name}

    service = ServiceManifest(
        api_version=config.service_api_version,
        kind=config.service_kind,
        metadata=ObjectMeta(name=name, labels=dict(labels)),
        selector=dict(labels),
        ports=tuple(
            ServicePort(name=port_name(i), port=p.host_port, target_port=port_name(i), protocol=p.protocol)
            for i, p in enumerate(command.ports)
        ),
    )

    container = ContainerSpec(
        name=name,
        image=command.image,
        ports=tuple(
            ContainerPort(name=port_name(i), container_port=p.container_port)
            for i, p in enumerate(command.ports)
        ),
        env=tuple(EnvEntry(name=e.key, value=e.value) for e in command.env_vars),
    )

    workload = WorkloadManifest(
        api_version=config.workload_api_version,
        kind=config.workload_kind,
        metadata=ObjectMeta(name=name, labels=dict(labels)),
        replicas=config.replicas,
        match_labels=dict(labels),
        template=PodTemplate(labels=dict(labels), container=container),
    )

    return service, workload
