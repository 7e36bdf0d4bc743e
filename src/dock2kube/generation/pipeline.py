#!/usr/bin/env python3
"""
DOCK2KUBE GENERATION PIPELINE
-----------------------------
Central coordinator for the pure part of the tool. Raw command text is
processed in a strict sequence:

    tokenize -> build ContainerCommand -> resolve name -> derive manifests

No filesystem access happens here; the engine persists the result.
"""

import logging
from typing import Callable, Optional

from dock2kube.core.config import GeneratorConfig
from dock2kube.core.ids import new_service_name
from dock2kube.core.models import GenerationContext
from dock2kube.generation.manifests import build_manifests
from dock2kube.parsing.command import build_container_command
from dock2kube.parsing.tokenizer import CommandTokenizer

logger = logging.getLogger("dock2kube.pipeline")


class GenerationPipeline:
    """
    The Orchestrator: ensures tokenizing, model building and manifest
    derivation happen in a strictly defined order.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None,
                 name_factory: Callable[[], str] = new_service_name):
        """
        Args:
            config: Schema constants; defaults to GeneratorConfig().
            name_factory: Identifier generator used when `--name` is absent.
        """
        self.config = config or GeneratorConfig()
        self.name_factory = name_factory
        self.tokenizer = CommandTokenizer()

    def run(self, command_text: str) -> GenerationContext:
        """
        Raises:
            ValidationError: propagated unchanged from the parsers.
        """
        context = GenerationContext(raw_text=command_text)

        # --- PHASE 1: TOKENIZE ---
        context.tokens = self.tokenizer.tokenize(command_text)
        logger.debug(f"Tokens: {context.tokens}")

        # --- PHASE 2: COMMAND MODEL ---
        context.command = build_container_command(context.tokens, self.config.default_protocol)

        # --- PHASE 3: NAME RESOLUTION ---
        # Resolved once so service, deployment and output directory agree.
        if context.command.name:
            context.name = context.command.name
        else:
            context.name = self.name_factory()
            context.name_generated = True
            logger.info(f"No --name given, generated '{context.name}'")

        # --- PHASE 4: MANIFEST DERIVATION ---
        context.service, context.workload = build_manifests(context.command, context.name, self.config)

        return context
