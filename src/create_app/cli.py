"""Command line interface for create-app."""

from __future__ import annotations

import argparse
import logging
from typing import NoReturn, Sequence

from . import __version__
from .config import ScaffoldSettings
from .errors import MissingProjectDirectoryError, ScaffoldError, UsageError
from .reporter import ProgressReporter
from .scaffold import ProjectScaffolder
from .schema import InvocationRequest, Template

PROG = "create-app"

LOGGER = logging.getLogger(__name__)


class ArgumentParser(argparse.ArgumentParser):
    """Parser that raises :class:`UsageError` instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(
            f"error: {message}",
            hint=f"Run {self.prog} --help to see all options",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = ArgumentParser(
        prog=PROG,
        usage="%(prog)s <project-directory> [options]",
        description="Create a new project from the remote template",
        epilog="Only <project-directory> is required.",
    )
    parser.add_argument(
        "project_directory",
        nargs="?",
        metavar="project-directory",
        help="Directory to create; its name becomes the package name",
    )
    parser.add_argument(
        "-t",
        "--template",
        default=Template.REACT.value,
        help="Choose a template <react | node>; other values fall back to react",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every step to stderr",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_request(
    argv: Sequence[str] | None = None,
    parser: argparse.ArgumentParser | None = None,
) -> tuple[InvocationRequest, argparse.Namespace]:
    """Turn ``argv`` into an :class:`InvocationRequest`.

    Unknown options are ignored. Raises :class:`UsageError` when an option is
    malformed and :class:`MissingProjectDirectoryError` when no project
    directory was given.
    """

    parser = parser or build_parser()
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        LOGGER.debug("Ignoring unrecognised arguments: %s", unknown)

    if not args.project_directory:
        raise MissingProjectDirectoryError("Please specify the project directory")

    request = InvocationRequest(
        project_name=args.project_directory,
        template=Template.resolve(args.template),
    )
    return request, args


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    reporter = ProgressReporter()

    try:
        request, args = parse_request(argv, parser)
    except MissingProjectDirectoryError as exc:
        reporter.usage(parser.prog)
        return exc.exit_code
    except UsageError as exc:
        reporter.report_error(exc)
        return exc.exit_code

    _configure_logging(args.verbose)

    try:
        settings = ScaffoldSettings.from_env()
        scaffolder = ProjectScaffolder(settings, reporter=reporter)
        result = scaffolder.create(request)
    except ScaffoldError as exc:
        if not exc.reported:
            reporter.report_error(exc)
        return exc.exit_code

    reporter.success(result.name, result.path, result.package_manager)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
