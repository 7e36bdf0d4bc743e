#!/usr/bin/env python3
"""
DOCK2KUBE PORT PARSER
---------------------
Turns one `containerPort:hostPort[/protocol]` token into a PortMapping.
"""

from dock2kube.core.errors import ErrorKind, ValidationError
from dock2kube.core.models import PortMapping, Protocol

MIN_PORT = 1
MAX_PORT = 65535


def _to_port_number(text: str, parameter_name: str) -> int:
    # int() alone would accept " 80", "+80" and "8_0"
    if not (text.isascii() and text.isdigit()):
        raise ValidationError(
            ErrorKind.INVALID_PORT_NUMBER,
            f"'{text}' is not a base-10 port number",
            "to_port_mapping", parameter_name, "port_is_integer"
        )
    port = int(text)

    if not MIN_PORT <= port <= MAX_PORT:
        raise ValidationError(
            ErrorKind.INVALID_PORT_NUMBER,
            f"Port {port} is outside {MIN_PORT}-{MAX_PORT}",
            "to_port_mapping", parameter_name, "port_in_range"
        )
    return port


def to_port_mapping(port_map_text: str, default_protocol: str = "TCP") -> PortMapping:
    """
    Parses a port token.

    Example: "5775:5775/udp" -> PortMapping(5775, 5775, Protocol.UDP)
    """
    if not port_map_text:
        raise ValidationError(
            ErrorKind.EMPTY_INPUT,
            "Cannot map empty text to port map",
            "to_port_mapping", "port_map_text", "text_isnot_empty"
        )

    # map/protocol
    map_text, _, protocol_text = port_map_text.partition('/')
    protocol_name = protocol_text.upper() if protocol_text else default_protocol.upper()
    try:
        protocol = Protocol(protocol_name)
    except ValueError:
        raise ValidationError(
            ErrorKind.UNSUPPORTED_PROTOCOL,
            f"Protocol '{protocol_text}' is not one of TCP, UDP",
            "to_port_mapping", "port_map_text", "protocol_is_supported"
        )

    parts = map_text.split(':')
    if len(parts) != 2:
        raise ValidationError(
            ErrorKind.INVALID_PORT_NUMBER,
            f"'{map_text}' must look like containerPort:hostPort",
            "to_port_mapping", "port_map_text", "port_is_integer"
        )

    container_port = _to_port_number(parts[0], "container_port")
    host_port = _to_port_number(parts[1], "host_port")

    return PortMapping(container_port=container_port, host_port=host_port, protocol=protocol)
