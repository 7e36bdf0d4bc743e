#!/usr/bin/env python3
"""
DOCK2KUBE COMMAND BUILDER
-------------------------
Assembles the immutable ContainerCommand from a tokenized flag map.
"""

import re
from typing import Iterable, List, Optional

from dock2kube.core.errors import ErrorKind, ValidationError
from dock2kube.core.models import CommandTokens, ContainerCommand
from dock2kube.parsing.env import to_env_var
from dock2kube.parsing.ports import to_port_mapping

# RFC 1123 label: what Kubernetes accepts for Service names; also keeps
# the name a single path component under the output root
NAME_PATTERN = re.compile(r"[a-z0-9]([-a-z0-9]*[a-z0-9])?")
MAX_NAME_LENGTH = 63


def unique_in_order(texts: Iterable[str]) -> List[str]:
    """Drops repeated raw tokens, keeping the first occurrence."""
    return list(dict.fromkeys(texts))


def validate_name(name: Optional[str]) -> Optional[str]:
    if name is None:
        return None
    if len(name) > MAX_NAME_LENGTH or not NAME_PATTERN.fullmatch(name):
        raise ValidationError(
            ErrorKind.INVALID_NAME,
            f"'{name}' must be lowercase alphanumerics or '-', at most {MAX_NAME_LENGTH} characters",
            "build_container_command", "name", "name_is_dns_label"
        )
    return name


def build_container_command(tokens: CommandTokens, default_protocol: str = "TCP") -> ContainerCommand:
    """
    Deduplicates and parses the port and env tokens, then picks the image.

    Raises:
        ValidationError: on the first malformed fragment, or MissingImage
            when no positional token is present, InvalidName when `--name`
            is not a Kubernetes-compatible name.
    """
    name = validate_name(tokens.name)
    ports = tuple(to_port_mapping(t, default_protocol) for t in unique_in_order(tokens.ports))
    env_vars = tuple(to_env_var(t) for t in unique_in_order(tokens.env))

    if not tokens.positionals:
        raise ValidationError(
            ErrorKind.MISSING_IMAGE,
            "No image reference found at the end of the command",
            "build_container_command", "positionals", "image_is_present"
        )

    image = tokens.positionals[-1].rstrip('\r\n')
    if not image:
        raise ValidationError(
            ErrorKind.MISSING_IMAGE,
            "Image reference is empty",
            "build_container_command", "positionals", "image_is_present"
        )

    return ContainerCommand(
        name=name,
        daemon=tokens.detach,
        ports=ports,
        env_vars=env_vars,
        image=image,
    )
