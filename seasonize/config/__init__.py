"""Configuration and CLI handling."""

from seasonize.config.settings import (
    INFO_JSON_SUFFIX,
    SHORTS_URL_SUFFIX,
    SEASON_FOLDER_TEMPLATE,
    UPLOAD_DATE_FORMAT,
    LOG_FILE,
)
from seasonize.config.context import ExecutionContext
from seasonize.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    validate_directories,
    args_to_cli_args,
)

__all__ = [
    "INFO_JSON_SUFFIX",
    "SHORTS_URL_SUFFIX",
    "SEASON_FOLDER_TEMPLATE",
    "UPLOAD_DATE_FORMAT",
    "LOG_FILE",
    "ExecutionContext",
    "CLIArgs",
    "create_parser",
    "parse_arguments",
    "validate_directories",
    "args_to_cli_args",
]
