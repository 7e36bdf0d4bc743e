#!/usr/bin/env python3
"""
DOCK2KUBE CONFIGURATION
-----------------------
Literal schema constants used during generation, plus optional user
overrides loaded from `.dock2kube.yaml` (working directory) or
`~/.dock2kube/config.yaml`.

Precedence: built-in defaults < config file < CLI flags.
"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from ruamel.yaml import YAML, YAMLError

logger = logging.getLogger("dock2kube.config")

CONFIG_FILENAME = ".dock2kube.yaml"
USER_CONFIG_PATH = Path.home() / ".dock2kube" / "config.yaml"


@dataclass(frozen=True)
class GeneratorConfig:
    """Schema identifiers and output layout. Never computed, only configured."""
    service_api_version: str = "v1"
    service_kind: str = "Service"
    workload_api_version: str = "apps/v1"
    workload_kind: str = "Deployment"
    pipeline_api_version: str = "skaffold/v2beta29"
    pipeline_kind: str = "Config"
    default_protocol: str = "TCP"
    replicas: int = 1
    label_key: str = "app"
    output_root: str = str(Path.home() / ".dock2kube" / "envs")
    manifest_filename: str = "service.yml"
    pipeline_filename: str = "skaffold.yml"

    def with_overrides(self, overrides: Dict[str, Any]) -> "GeneratorConfig":
        """Returns a copy with known keys replaced; unknown keys are logged."""
        known = {f.name for f in fields(self)}
        accepted = {}
        for key, value in overrides.items():
            if key not in known:
                logger.warning(f"Ignoring unknown config key '{key}'")
                continue
            if value is None:
                continue
            accepted[key] = value
        return replace(self, **accepted)


class ConfigManager:
    """
    Resolves the effective GeneratorConfig.

    The first existing file among the search paths is used; a file that
    fails to parse is reported and skipped so the defaults still apply.
    """

    def __init__(self, search_paths: Optional[List[Path]] = None):
        if search_paths is None:
            search_paths = [Path.cwd() / CONFIG_FILENAME, USER_CONFIG_PATH]
        self.search_paths = search_paths
        self.loaded_from: Optional[Path] = None
        self.config = self._load()

    def _load(self) -> GeneratorConfig:
        yaml = YAML(typ='safe')
        config = GeneratorConfig()

        for path in self.search_paths:
            if not path.exists():
                continue
            try:
                loaded = yaml.load(path)
            except (YAMLError, OSError) as e:
                logger.warning(f"Failed to parse {path}: {e}")
                continue

            if loaded and not isinstance(loaded, dict):
                logger.warning(f"Ignoring {path}: top level must be a mapping")
                continue

            if loaded:
                config = config.with_overrides(loaded)
            self.loaded_from = path
            logger.info(f"Loaded configuration from {path}")
            break

        return config

    def resolve(self, output_root: Optional[str] = None) -> GeneratorConfig:
        """Applies CLI-level overrides on top of the file configuration."""
        return self.config.with_overrides({"output_root": output_root})
