"""Dock2Kube: turn a `docker run` command into Kubernetes + Skaffold configs."""

__version__ = "0.1.0"
