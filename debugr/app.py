"""debugr command-line entry point."""

import argparse
import asyncio
import dataclasses
import sys
from typing import List, Optional

from debugr import __version__
from debugr.adapters.llm.anthropic_adapter import AnthropicAdapter, LLMError
from debugr.config import AppConfig, ConfigError
from debugr.domain.assistant import DebugAssistant
from debugr.domain.models import FileContext
from debugr.executor import ActionExecutor
from debugr.infrastructure.context import ContextError, load_directory_context, load_file_context
from debugr.logging_utils import get_logger, setup_logging


def _fatal(msg: str) -> int:
    print(f"debugr: {msg}", file=sys.stderr)
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="debugr",
        description="Ask an LLM for debugging and testing steps, then run them.",
    )
    parser.add_argument("prompt", nargs="*", help="What to debug or test")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print suggested actions without executing",
    )
    parser.add_argument("--context", metavar="FILE", help="Path to the file to use as context")
    parser.add_argument(
        "--context-dir",
        metavar="DIR",
        help="Path to the directory to use as context",
    )
    parser.add_argument("--model", help="Model identifier (default: DEBUGR_MODEL or built-in)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_context(args: argparse.Namespace) -> Optional[FileContext]:
    if args.context:
        return load_file_context(args.context)
    if args.context_dir:
        return load_directory_context(args.context_dir)
    return None


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # credentials are checked before usage, as at startup
    try:
        config = AppConfig.from_env()
    except ConfigError as e:
        return _fatal(str(e))

    if not args.prompt:
        parser.error("a prompt is required, e.g. debugr --context main.go why does this panic")
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be positive")

    overrides = {"dry_run": args.dry_run, "debug": args.debug or config.debug}
    if args.model:
        overrides["model"] = args.model
    if args.timeout is not None:
        overrides["timeout_seconds"] = args.timeout
    config = dataclasses.replace(config, **overrides)

    setup_logging(config.debug)
    log = get_logger("app")
    log.debug("Initializing client with API key: {}", config.masked_api_key)

    try:
        context = load_context(args)
    except ContextError as e:
        return _fatal(str(e))

    prompt = " ".join(args.prompt)
    assistant = DebugAssistant(AnthropicAdapter(config), model=config.model)
    try:
        actions = asyncio.run(assistant.ask(prompt, context))
    except LLMError as e:
        return _fatal(f"Failed to get actions: {e}")

    if not actions:
        print("No actions suggested.")
        return 0

    report = ActionExecutor().run(actions, dry_run=config.dry_run)
    if report.failed:
        log.warning("{} of {} actions failed", len(report.failed), len(actions))
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
