#!/usr/bin/env python3
"""
DOCK2KUBE VALIDATOR - The Judge
-------------------------------
Final safety gate before the engine writes anything. Re-checks that the
Service will actually route to the Deployment's pods.
"""

import logging
from typing import Tuple

from dock2kube.generation.manifests import ServiceManifest, WorkloadManifest

logger = logging.getLogger("dock2kube.validator")


class LinkageValidator:
    """
    Verifies the cross-entity links of a derived Service/Deployment pair:
    port names aligned by index and identical `app` labels everywhere.
    """

    def validate(self, service: ServiceManifest, workload: WorkloadManifest) -> Tuple[bool, str]:
        # --- TEST 1: Label consistency ---
        label_sets = {
            "service.selector": service.selector,
            "deployment.matchLabels": workload.match_labels,
            "deployment.template.labels": workload.template.labels,
        }
        expected = service.selector
        for where, labels in label_sets.items():
            if labels != expected:
                return False, f"Label mismatch: {where}={labels} but service.selector={expected}"

        if service.metadata.name != workload.metadata.name:
            return False, (f"Name mismatch: service '{service.metadata.name}' "
                           f"vs deployment '{workload.metadata.name}'")

        # --- TEST 2: Port alignment ---
        service_ports = service.ports
        container_ports = workload.container.ports
        if len(service_ports) != len(container_ports):
            return False, (f"Port count mismatch: service has {len(service_ports)}, "
                           f"container has {len(container_ports)}")

        container_port_names = {p.name for p in container_ports}
        for i, (sp, cp) in enumerate(zip(service_ports, container_ports)):
            if sp.name != cp.name:
                return False, f"Port {i}: service port '{sp.name}' != container port '{cp.name}'"
            if sp.target_port not in container_port_names:
                return False, f"Port {i}: targetPort '{sp.target_port}' names no container port"

        return True, "Service routes to the deployment's pods."
