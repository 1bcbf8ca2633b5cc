"""Shared constants: environment variable names, config locations, report format."""

ENV_ALWAYS_RUN_DIAGNOSTICS = "ALWAYS_RUN_DIAGNOSTIC_TEARDOWNS"

CONFIG_DIR_NAME = ".namedteardown"
CONFIG_FILE_NAME = "config.yaml"

UNCLEARED_MESSAGE = "Error - {count} teardown lists were left uncleared: {names}"


def format_uncleared(names: list[str]) -> str:
    """Build the failure message reported by verify_teardown."""
    return UNCLEARED_MESSAGE.format(count=len(names), names=names)
