#!/usr/bin/env python3
"""
DOCK2KUBE ENGINE - The Orchestrator
-----------------------------------
The GenerationEngine runs the pure GenerationPipeline, renders the
results and persists them:

    <output_root>/<name>/service.yml   (Service --- Deployment)
    <output_root>/<name>/skaffold.yml  (references service.yml)

Nothing touches the disk until every document has been rendered and the
linkage check has passed, so a bad command never leaves partial output.

Author: Dock2Kube Team
"""

import os
import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from dock2kube.core.config import GeneratorConfig
from dock2kube.core.ids import new_service_name
from dock2kube.core.models import GenerationResult
from dock2kube.generation.exporter import ManifestExporter
from dock2kube.generation.pipeline import GenerationPipeline
from dock2kube.generation.skaffold import build_pipeline_descriptor
from dock2kube.validator.validator import LinkageValidator

logger = logging.getLogger("dock2kube.engine")


class GenerationEngine:
    """
    Principal orchestrator: pipeline -> validation -> export -> atomic write.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None,
                 name_factory: Callable[[], str] = new_service_name):
        self.config = config or GeneratorConfig()
        self.output_root = Path(self.config.output_root).expanduser().resolve()

        self.pipeline = GenerationPipeline(self.config, name_factory)
        self.exporter = ManifestExporter()
        self.validator = LinkageValidator()

    def generate(self, command_text: str, dry_run: bool = False) -> GenerationResult:
        """
        Converts one command into the two config files.

        Raises:
            ValidationError: the command text is malformed (nothing written).
            RuntimeError: the derived manifests failed the linkage check.
            OSError: the files could not be written.
        """
        # Phase 1: Pure derivation (may raise ValidationError)
        context = self.pipeline.run(command_text)

        # Phase 2: Pre-write validation
        valid, message = self.validator.validate(context.service, context.workload)
        if not valid:
            raise RuntimeError(f"Refusing to write inconsistent manifests: {message}")

        # Phase 3: Render everything before any I/O
        service_dir = self.output_root / context.name
        if service_dir.resolve().parent != self.output_root:
            raise RuntimeError(f"Refusing to write outside {self.output_root}: name '{context.name}'")
        manifest_path = service_dir / self.config.manifest_filename
        pipeline_path = service_dir / self.config.pipeline_filename

        manifest_yaml = self.exporter.export_manifests(context.service, context.workload)
        descriptor = build_pipeline_descriptor(context.name, str(manifest_path), self.config)
        pipeline_yaml = self.exporter.export_descriptor(descriptor)

        result = GenerationResult(
            name=context.name,
            service_dir=str(service_dir),
            manifest_path=str(manifest_path),
            pipeline_path=str(pipeline_path),
            manifest_yaml=manifest_yaml,
            pipeline_yaml=pipeline_yaml,
            name_generated=context.name_generated,
        )
        if not context.command.daemon:
            result.notes.append("Command had no -d flag; the deployment runs detached regardless.")

        if dry_run:
            return result

        # Phase 4: Persistence
        self._write_all(service_dir, [(manifest_path, manifest_yaml), (pipeline_path, pipeline_yaml)])
        result.written = True
        logger.info(f"Wrote {manifest_path} and {pipeline_path}")

        return result

    def _write_all(self, service_dir: Path, files: List[Tuple[Path, str]]):
        """
        Writes every file or none of them.

        All contents are staged in temp files first; targets are only
        replaced once staging succeeded. On failure, staged files and any
        target this call created are removed.
        """
        created_dir = not service_dir.exists()
        if created_dir:
            logger.info(f"Creating output directory: {service_dir}")
            service_dir.mkdir(parents=True, exist_ok=True)

        if not os.access(service_dir, os.W_OK):
            raise PermissionError(f"No write access to {service_dir}")

        staged = [(target, target.with_suffix('.dock2kube.tmp')) for target, _ in files]
        fresh_targets = [target for target, _ in files if not target.exists()]
        try:
            for (target, temp_file), (_, content) in zip(staged, files):
                temp_file.write_text(content, encoding='utf-8')
            for target, temp_file in staged:
                os.replace(temp_file, target)
        except OSError as e:
            for target, temp_file in staged:
                if temp_file.exists(): temp_file.unlink()
            for target in fresh_targets:
                if target.exists(): target.unlink()
            if created_dir and not any(service_dir.iterdir()):
                service_dir.rmdir()
            raise OSError(f"Atomic write failed: {str(e)}") from e
