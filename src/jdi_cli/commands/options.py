"""Shared option handling for commands that print data."""

from jdi_cli.config import get_config_manager
from jdi_cli.utils.exit_codes import ERROR_INVALID_ARGS
from jdi_cli.utils.ui.formatters import OUTPUT_FORMATS

from .decorators import AppError


def resolve_output_format(output: str | None, json_opt: bool = False) -> str:
    """Pick the output format from --json, --output or the configured default.

    Raises:
        AppError: If --output names a format the formatters cannot render
    """
    if json_opt:
        return "json"
    if output is None:
        return get_config_manager().config.output.format
    if output not in OUTPUT_FORMATS:
        raise AppError(
            f"Unknown output format '{output}' (expected one of: {', '.join(OUTPUT_FORMATS)})",
            exit_code=ERROR_INVALID_ARGS,
        )
    return output
