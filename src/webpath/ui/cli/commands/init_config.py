"""src/webpath/ui/cli/commands/init_config.py
What: Write a configuration file seeded with the active location settings.
Why: Give users an annotated starting point instead of an empty TOML file.
"""

from __future__ import annotations

import sys
from typing import final

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from webpath.config.config import Config
from webpath.config.paths import default_config_path
from webpath.platform.logging import DEFAULT_LOG_FILE, logger
from webpath.ui.cli.args.options import InitConfigArgs
from webpath.ui.cli.display.result import ResultDisplay

from .executor import CommandExecutor


@final
class InitConfigCommand(CommandExecutor):
    """Persist the effective configuration to disk."""

    args: InitConfigArgs

    def __init__(self, args: InitConfigArgs, result_display: ResultDisplay | None = None) -> None:
        super().__init__(result_display)
        self.args = args

    @override
    def execute(self) -> int:
        target = self.args.target or default_config_path()
        if target.exists() and not self.args.force:
            logger.error("Configuration already exists at %s (use --force to overwrite)", target)
            return 1

        configuration = Config(
            location_pathname=self.args.location.pathname,
            origin=self.args.location.origin,
            log_file=DEFAULT_LOG_FILE,
        )
        written = configuration.save(target)
        self.result_display.show_saved_config(str(written), quiet=self.args.quiet)
        return 0


__all__ = ["InitConfigCommand"]
