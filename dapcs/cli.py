"""
Command line entry point for dapcs
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from dapcs.adapter import DebugRegistry
from dapcs.adapter import adapter_definition
from dapcs.adapter import is_aborted
from dapcs.adapter import resolve_configuration
from dapcs.adapter import setup
from dapcs.adapter.configurations import ATTACH_PROCESS_NAME
from dapcs.adapter.configurations import LAUNCH_PROJECT_NAME
from dapcs.errors import DapcsError
from dapcs.resolution import ResolutionOrchestrator
from dapcs.services import ConsoleNotifier
from dapcs.services import ConsolePrompt
from dapcs.services import LanguageServerClient
from dapcs.services import ProcessPicker
from dapcs.services import list_processes

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ABORTED = 1
EXIT_ERROR = 2

# Eventually this can just be logging.getLevelNamesMapping()
NAME_TO_LEVEL: dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def _language_server(value: str) -> LanguageServerClient:
    name, sep, root = value.partition("=")
    if not sep or not name or not root:
        raise argparse.ArgumentTypeError(f"expected NAME=DIR, got {value!r}")
    return LanguageServerClient(name=name, root_dir=root)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dapcs",
        description="Resolve .NET debug configurations for netcoredbg",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=list(NAME_TO_LEVEL),
        help="Log level (default: WARNING)",
    )
    parser.add_argument("--netcoredbg", type=str, help="Path to the netcoredbg executable")

    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Resolve the 'Launch Project' configuration")
    resolve.add_argument("--cwd", type=str, help="Workspace directory (default: current directory)")
    resolve.add_argument(
        "--build-config",
        type=str,
        help="Build configuration folder under bin/ (default: Debug)",
    )
    resolve.add_argument(
        "--language-server",
        type=_language_server,
        action="append",
        default=[],
        metavar="NAME=DIR",
        help="Active language server and its root directory",
    )

    subparsers.add_parser("adapter", help="Print the debug adapter definition")
    subparsers.add_parser("attach", help="Pick a process and print the attach configuration")
    return parser


def _options_from_args(args: argparse.Namespace) -> dict[str, Any]:
    options: dict[str, Any] = {}
    if args.netcoredbg is not None:
        options["netcoredbg"] = {"path": args.netcoredbg}
    if getattr(args, "build_config", None) is not None:
        options["resolution"] = {"build_configuration": args.build_config}
    return options


def _print_json(payload: dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(payload, indent=2) + "\n")


def run(args: argparse.Namespace) -> int:
    registry = DebugRegistry()
    config = setup(registry, _options_from_args(args))

    if args.command == "adapter":
        _print_json(adapter_definition(config))
        return EXIT_OK

    prompt = ConsolePrompt()
    notifier = ConsoleNotifier()

    if args.command == "attach":
        template = registry.find_configuration(ATTACH_PROCESS_NAME)
        picker = ProcessPicker(prompt, lister=list_processes)
        configuration = resolve_configuration(
            template,
            resolve=lambda: None,
            pick_process=picker.pick,
        )
    else:
        template = registry.find_configuration(LAUNCH_PROJECT_NAME)
        orchestrator = ResolutionOrchestrator.from_config(
            config,
            prompt=prompt,
            notifier=notifier,
            language_servers=args.language_server,
            cwd=args.cwd,
        )
        configuration = resolve_configuration(
            template,
            resolve=orchestrator.resolve,
            pick_process=lambda: None,
        )

    if is_aborted(configuration):
        return EXIT_ABORTED
    _print_json(configuration)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the dapcs command line
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler()],
    )
    args = build_parser().parse_args(argv)
    logging.getLogger().setLevel(NAME_TO_LEVEL.get(args.log_level, logging.WARNING))

    try:
        return run(args)
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        return EXIT_ABORTED
    except DapcsError as exc:
        logger.error("dapcs setup failed: %s %s", exc, exc.details)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
