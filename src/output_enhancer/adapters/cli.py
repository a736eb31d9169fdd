"""CLI adapter – parses arguments, wires the pipeline, formats output."""

from __future__ import annotations

import argparse
import shutil
import sys
import textwrap
from typing import TextIO

from output_enhancer.adapters import presenters
from output_enhancer.application.ports import Logger, UrlStore
from output_enhancer.domain.value_objects import ColorMode, ServiceUrl


# ---------------------------------------------------------------------------
# Help text
# ---------------------------------------------------------------------------
HELP_TEXT = textwrap.dedent("""\
    eo – pipe command output through a local AI model for a cleaner, colorized summary.

    Usage:
      <command> | eo [--url=URL] [-v]
      eo -h | --help

    Options:
      -h, --help      Show this help and exit
      --url=URL       Use this Ollama base URL and remember it for later runs
      -v, --verbose   Print debug diagnostics to stderr

    What happens to the input:
      JSON object/array   pretty-printed locally, then analyzed by the model
      column table        aligned locally, then analyzed by the model
      anything else       rewritten and summarized by the model

    Environment (a .env file is honoured):
      OLLAMA_HOST      Fallback URL when none was saved (default http://localhost:11434)
      EO_CONFIG_FILE   File --url is saved to (default ~/.config/eo/config.txt)
      FORCE_COLOR      Always emit ANSI colors
      NO_COLOR         Never emit ANSI colors
      EO_VERBOSE       Same as --verbose

    Examples:
      df -h | eo
      curl -s https://api.github.com/repos/ollama/ollama | eo
      journalctl -n 50 | eo --url=http://gpu-box:11434
""")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _read_stdin(stream: TextIO | None) -> str:
    """Read all of *stream*; an interactive terminal counts as no input."""
    if stream is None or stream.isatty():
        return ""
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        return buffer.read().decode("utf-8", errors="replace")
    return stream.read()


def _terminal_width(stream: TextIO) -> int | None:
    """Column budget for local tables; None when output is not a terminal."""
    if not stream.isatty():
        return None
    return shutil.get_terminal_size().columns


def _resolve_url(
    flag: str | None,
    store: UrlStore,
    config: dict[str, str | None],
    logger: Logger,
) -> ServiceUrl:
    """Pick the service URL: --url flag, then the saved one, then OLLAMA_HOST."""
    from output_enhancer.infrastructure.ollama_provider import OllamaGateway

    if flag is not None:
        try:
            url = ServiceUrl.parse(flag)
        except ValueError as exc:
            logger.warn(f"Ignoring --url: {exc}")
        else:
            try:
                store.save(str(url))
            except OSError as exc:
                logger.warn(f"Could not save service URL: {exc}")
            return url

    for candidate in (store.load(), config.get("OLLAMA_HOST")):
        if not candidate:
            continue
        try:
            return ServiceUrl.parse(candidate)
        except ValueError as exc:
            logger.warn(f"Ignoring configured URL: {exc}")
    return ServiceUrl.parse(OllamaGateway.DEFAULT_HOST)


# ---------------------------------------------------------------------------
# Build container (lazy import to avoid circular deps)
# ---------------------------------------------------------------------------
def _build_container(args: argparse.Namespace) -> dict:
    from output_enhancer.infrastructure.config import is_truthy, load_config
    from output_enhancer.infrastructure.logger import ConsoleLogger
    from output_enhancer.infrastructure.ollama_provider import OllamaGateway
    from output_enhancer.infrastructure.url_store import FileUrlStore

    config = load_config()
    overrides = {k: config[k] for k in ("FORCE_COLOR", "NO_COLOR") if config.get(k)}
    colors = ColorMode.detect(sys.stdout, overrides)
    logger = ConsoleLogger(
        verbose=args.verbose or is_truthy(config.get("EO_VERBOSE")),
        colors=colors,
    )
    store = FileUrlStore(config.get("EO_CONFIG_FILE"))
    url = _resolve_url(args.url, store, config, logger)
    logger.debug("Service URL resolved", url=url, colors=colors.enabled)

    return {
        "logger": logger,
        "colors": colors,
        "gateway": OllamaGateway(url, logger),
    }


# ---------------------------------------------------------------------------
# Command handler
# ---------------------------------------------------------------------------
def cmd_enhance(args: argparse.Namespace, unknown: list[str]) -> None:
    from output_enhancer.application.ports import GatewayError
    from output_enhancer.application.use_cases.discover_models import DiscoverModels
    from output_enhancer.application.use_cases.enhance_output import EnhanceOutput, EnhanceRequest

    c = _build_container(args)
    for extra in unknown:
        c["logger"].warn(f"Ignoring unknown argument: {extra}")

    # The service must answer before any input is consumed.
    try:
        discovered = DiscoverModels(gateway=c["gateway"], logger=c["logger"]).execute()
    except GatewayError as exc:
        presenters.present_fatal(str(exc), c["colors"])
        sys.exit(1)

    raw_input = _read_stdin(sys.stdin)
    if not raw_input.strip():
        presenters.present_no_input()
        return

    uc = EnhanceOutput(
        gateway=c["gateway"],
        logger=c["logger"],
        colors=c["colors"],
        width=_terminal_width(sys.stdout),
    )
    resp = uc.execute(EnhanceRequest(raw_input=raw_input, model=discovered.model))
    presenters.present_enhanced(resp)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eo",
        description="AI-enhanced command output",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", default=False)
    parser.add_argument("--url", type=str, default=None)
    parser.add_argument("-v", "--verbose", action="store_true", default=False)
    return parser


def run_cli(argv: list[str] | None = None) -> None:
    """Parse args and run the pipeline once."""
    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)

    if args.help:
        print(HELP_TEXT)
        return

    try:
        cmd_enhance(args, unknown)
    except Exception as exc:
        from output_enhancer.infrastructure.config import redact_secrets
        print(f"ERROR: {redact_secrets(str(exc))}", file=sys.stderr)
        sys.exit(1)
