import argparse
import sys
from typing import List, Optional
from rich.console import Console

from svcsetup_core.config import load_settings
from svcsetup_core.core.context import ExecutionContext, resolve_paths
from svcsetup_core.core.errors import HelpRequested, SetupError, UsageError
from svcsetup_core.core.executor import ActionExecutor
from svcsetup_core.core.runner import SubprocessRunner
from svcsetup_core.init_systems import InitSystem
from svcsetup_core.models.service_info import AUTO, RunConfig
from svcsetup_core.output.console import Reporter


class SetupArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports problems as UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> SetupArgumentParser:
    parser = SetupArgumentParser(
        prog="pmtr-setup",
        add_help=False,
        description="""
            PMTR SETUP:
            Installs, enables, starts, stops and uninstalls the pmtr
            service for the init system found on this host.
        """
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress status messages."
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Show commands as they run; repeat for more detail."
    )
    parser.add_argument(
        "--auto",
        action="store_true",
        help="Same as --install-service auto --enable-service --start-service."
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print what would be done without changing anything."
    )
    parser.add_argument(
        "--bindir",
        default=AUTO,
        metavar="auto|path",
        help="""
            Directory holding the pmtr executable. With auto the standard
            binary directories are searched.
        """
    )
    parser.add_argument(
        "--initsys",
        default=AUTO,
        choices=[AUTO] + InitSystem.names(),
        help="Init system to install for. With auto it is detected."
    )
    parser.add_argument(
        "--start-service",
        action="store_true",
        help="Start the service."
    )
    parser.add_argument(
        "--enable-service",
        action="store_true",
        help="Enable the service at boot."
    )
    parser.add_argument(
        "--stop-service",
        action="store_true",
        help="Stop the service."
    )
    parser.add_argument(
        "--install-service",
        default=None,
        metavar="auto|path",
        help="""
            Install the service file. With auto it goes to the standard
            location for the init system, otherwise to the given path.
        """
    )
    parser.add_argument(
        "--uninstall-service",
        action="store_true",
        help="Disable the service and remove its service file."
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output."
    )
    parser.add_argument(
        "-h", "--help",
        action="store_true",
        help="Show this message and exit."
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> RunConfig:
    """
    Parse the command line into a RunConfig.

    Raises UsageError for unknown flags, --help, or when nothing was asked
    for.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.help:
        raise HelpRequested("help requested")

    install = args.install_service
    enable = args.enable_service
    start = args.start_service
    if args.auto:
        # an explicit --install-service path is kept
        install = install or AUTO
        enable = True
        start = True

    config = RunConfig(
        quiet=args.quiet,
        verbose_level=args.verbose,
        auto=args.auto,
        dry_run=args.dry_run,
        bindir=args.bindir,
        init_system=args.initsys,
        start=start,
        enable=enable,
        stop=args.stop_service,
        install=install,
        uninstall=args.uninstall_service,
        no_color=args.no_color,
        help=args.help,
    )
    if not config.has_work:
        raise UsageError(
            "nothing to do: give at least one of --install-service, "
            "--start-service, --stop-service, --uninstall-service or --auto"
        )
    return config


def run(config: RunConfig, runner=None, reporter: Optional[Reporter] = None,
        root: str = "/"):
    settings = load_settings()
    reporter = reporter or Reporter(config)
    resolved = resolve_paths(config, settings, root=root)
    reporter.debug(1, f"using init system {resolved.init_system}, binaries in {resolved.bindir}")

    context = ExecutionContext(
        config=config,
        settings=settings,
        resolved=resolved,
        runner=runner or SubprocessRunner(),
        reporter=reporter,
        root=root,
    )
    ActionExecutor(context).run()


def main(argv: Optional[List[str]] = None):
    err_console = Console(stderr=True, highlight=False)
    try:
        config = parse_args(argv)
    except UsageError as e:
        if not isinstance(e, HelpRequested):
            err_console.print(f"pmtr-setup: {e.message}", markup=False, soft_wrap=True)
        err_console.print(build_parser().format_help(), markup=False, soft_wrap=True)
        sys.exit(e.exit_code)

    reporter = Reporter(config)
    try:
        run(config, reporter=reporter)
    except SetupError as e:
        reporter.error(e.message)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
