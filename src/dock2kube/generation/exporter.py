#!/usr/bin/env python3
"""
DOCK2KUBE EXPORTER - YAML Rendering
-----------------------------------
Converts the derived entities into YAML documents with Kubernetes-style
key order and indentation.
"""

import io
from typing import Any, List

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from dock2kube.generation.manifests import ServiceManifest, WorkloadManifest
from dock2kube.generation.skaffold import PipelineDescriptor


class ManifestExporter:
    """
    The Renderer: turns entity graphs into YAML strings.
    """

    def __init__(self):
        self.yaml = YAML(typ='rt')
        # Standard K8s: 2 spaces, but sequences are indented 4 (offset 2)
        # for maximum readability in IDEs.
        self.yaml.indent(mapping=2, sequence=4, offset=2)
        self.yaml.width = 4096
        self.preferred_order = ["apiVersion", "kind", "metadata", "spec", "deploy"]

    def _to_commented(self, data: Any, top_level: bool = False) -> Any:
        """
        Recursively converts plain containers into ruamel types.
        Top-level keys follow preferred_order; nested keys keep their order.
        """
        if isinstance(data, dict):
            keys = list(data.keys())
            if top_level:
                def sort_logic(key):
                    if key in self.preferred_order:
                        return self.preferred_order.index(key)
                    # Unknown keys keep their relative original position
                    return len(self.preferred_order) + keys.index(key)
                keys = sorted(keys, key=sort_logic)

            result = CommentedMap()
            for key in keys:
                result[key] = self._to_commented(data[key])
            return result

        if isinstance(data, (list, tuple)):
            return CommentedSeq(self._to_commented(item) for item in data)

        return data

    def _dump_all(self, documents: List[dict]) -> str:
        stream = io.StringIO()
        for i, doc in enumerate(documents):
            if i > 0:
                stream.write("---\n")
            self.yaml.dump(self._to_commented(doc, top_level=True), stream)
        return stream.getvalue()

    def export_manifests(self, service: ServiceManifest, workload: WorkloadManifest) -> str:
        """Service document, `---`, then the Deployment document."""
        return self._dump_all([service.to_manifest(), workload.to_manifest()])

    def export_descriptor(self, descriptor: PipelineDescriptor) -> str:
        return self._dump_all([descriptor.to_manifest()])
