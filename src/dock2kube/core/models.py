#!/usr/bin/env python3
"""
DOCK2KUBE CORE MODELS
---------------------
Defines the structured description of a container-launch command.
These records are built once per invocation and never mutated.

Author: Dock2Kube Team
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, List, Any


class Protocol(str, Enum):
    """Transport protocols accepted in a port mapping."""
    TCP = "TCP"
    UDP = "UDP"


@dataclass(frozen=True)
class PortMapping:
    """A single `containerPort:hostPort[/protocol]` binding."""
    container_port: int
    host_port: int
    protocol: Protocol = Protocol.TCP


@dataclass(frozen=True)
class EnvVar:
    """A single `key=value` environment assignment."""
    key: str
    value: str


@dataclass(frozen=True)
class CommandTokens:
    """
    Flag map produced by the tokenizer.

    Aliases are already merged: `-p`/`--port` land in `ports` and
    `-e`/`--env` land in `env`, each in the order they were given.
    """
    ports: Tuple[str, ...] = ()
    env: Tuple[str, ...] = ()
    name: Optional[str] = None
    detach: bool = False
    positionals: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ContainerCommand:
    """
    The immutable model of a `docker run` invocation.

    `name` is None when no `--name` flag was given; the caller resolves it
    through the identifier generator before building manifests.
    """
    name: Optional[str]
    daemon: bool
    ports: Tuple[PortMapping, ...]
    env_vars: Tuple[EnvVar, ...]
    image: str


@dataclass
class GenerationContext:
    """
    Working record of a single generation run.

    Filled sequentially by the GenerationPipeline: text, tokens, command,
    resolved name and finally the derived entities.
    """
    raw_text: str
    tokens: Optional[CommandTokens] = None
    command: Optional[ContainerCommand] = None
    name: Optional[str] = None
    name_generated: bool = False
    service: Any = None     # generation.manifests.ServiceManifest
    workload: Any = None    # generation.manifests.WorkloadManifest


@dataclass
class GenerationResult:
    """What the engine produced (and, unless dry-run, persisted)."""
    name: str
    service_dir: str
    manifest_path: str
    pipeline_path: str
    manifest_yaml: str
    pipeline_yaml: str
    written: bool = False
    name_generated: bool = False
    notes: List[str] = field(default_factory=list)
