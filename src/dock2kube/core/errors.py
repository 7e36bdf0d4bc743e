#!/usr/bin/env python3
"""
DOCK2KUBE ERRORS - Structured Validation Failures
-------------------------------------------------
Every user-correctable problem with the input command is raised as a
ValidationError. Callers branch on `kind` instead of matching messages.

Author: Dock2Kube Team
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of input problems the parsers can report."""
    EMPTY_INPUT = "EmptyInput"
    MALFORMED_ASSIGNMENT = "MalformedAssignment"
    INVALID_PORT_NUMBER = "InvalidPortNumber"
    UNSUPPORTED_PROTOCOL = "UnsupportedProtocol"
    MISSING_IMAGE = "MissingImage"
    INVALID_NAME = "InvalidName"
    MALFORMED_COMMAND = "MalformedCommand"


class ValidationError(ValueError):
    """
    Raised when a fragment of the command cannot be turned into the model.

    Attributes:
        kind: The ErrorKind category.
        fn_name: The operation that rejected the input.
        parameter_name: The offending parameter of that operation.
        validation_name: Identifier of the rule that failed.
    """

    def __init__(self, kind: ErrorKind, message: str, fn_name: str,
                 parameter_name: str, validation_name: str):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.fn_name = fn_name
        self.parameter_name = parameter_name
        self.validation_name = validation_name

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "fn_name": self.fn_name,
            "parameter_name": self.parameter_name,
            "validation_name": self.validation_name,
        }

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message} ({self.fn_name}.{self.parameter_name}, rule={self.validation_name})"
