"""Parser for `-e KEY=VALUE` tokens."""

from dock2kube.core.errors import ErrorKind, ValidationError
from dock2kube.core.models import EnvVar


def to_env_var(env_var_text: str) -> EnvVar:
    """Splits on the first '=' only, so values may contain '='."""
    if not env_var_text:
        raise ValidationError(
            ErrorKind.EMPTY_INPUT,
            "Cannot map empty text to environment variable",
            "to_env_var", "env_var_text", "text_isnot_empty"
        )

    key, sep, value = env_var_text.partition('=')
    if not sep or not key:
        raise ValidationError(
            ErrorKind.MALFORMED_ASSIGNMENT,
            f"'{env_var_text}' is not a KEY=VALUE assignment",
            "to_env_var", "env_var_text", "text_has_assignment"
        )

    return EnvVar(key=key, value=value)
