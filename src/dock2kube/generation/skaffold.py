"""
Skaffold pipeline descriptor pointing at the generated manifest.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from dock2kube.core.config import GeneratorConfig
from dock2kube.core.errors import ErrorKind, ValidationError


@dataclass(frozen=True)
class PipelineDescriptor:
    api_version: str
    kind: str
    name: str
    manifests: Tuple[str, ...]

    def to_manifest(self) -> Dict[str, Any]:
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": {"name": self.name},
            "deploy": {"kubectl": {"manifests": list(self.manifests)}},
        }


def build_pipeline_descriptor(name: str, manifest_path: str,
                              config: GeneratorConfig = GeneratorConfig()) -> PipelineDescriptor:
    """Wraps exactly one manifest path into a `skaffold run`-ready Config."""
    for parameter_name, value in (("name", name), ("manifest_path", manifest_path)):
        if not value:
            raise ValidationError(
                ErrorKind.EMPTY_INPUT,
                f"Pipeline descriptor needs a non-empty {parameter_name}",
                "build_pipeline_descriptor", parameter_name, "text_isnot_empty"
            )

    return PipelineDescriptor(
        api_version=config.pipeline_api_version,
        kind=config.pipeline_kind,
        name=name,
        manifests=(manifest_path,),
    )
