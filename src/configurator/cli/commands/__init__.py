"""CLI command implementations for the configurator application.

This package contains subcommands for the configurator CLI, including:
- validate: Validate a configuration file
- options / rules: Inspect the option catalog and the rule set
- init / summary: Create and summarize configuration files
"""

from configurator.cli.commands.catalog import options_command, rules_command
from configurator.cli.commands.documents import init_command, summary_command
from configurator.cli.commands.validate import validate_command

__all__ = [
    "init_command",
    "options_command",
    "rules_command",
    "summary_command",
    "validate_command",
]
