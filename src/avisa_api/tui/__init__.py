"""Front-end de terminal da AvisaAPI.

Uso:
    avisa-tui --token SEU_TOKEN --log-level INFO

Sem ``--token``, usa ``AVISA_API_TOKEN`` e, por fim, pede o token sem eco.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from avisa_api.config.logging import configure_logging, get_logger, new_correlation_id
from avisa_api.config.settings import configure, get_env_settings
from avisa_api.tui.app import App
from avisa_api.tui.prompt import Prompt
from avisa_api.utils.errors import ConfigurationError

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="avisa-tui",
        description="Cliente de terminal para a AvisaAPI (WhatsApp).",
    )
    parser.add_argument("--token", default=None, help="Bearer token da AvisaAPI")
    parser.add_argument("--base-url", default=None, help="URL base da API")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    return parser


def main(argv: Sequence[str] | None = None, prompt: Prompt | None = None) -> int:
    args = build_parser().parse_args(argv)
    # correlation_id fixo durante toda a sessão
    session_id = new_correlation_id()
    try:
        configure_logging(
            level=args.log_level,
            correlation_id_getter=lambda: session_id,
            stream=sys.stderr,
        )
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    try:
        env = get_env_settings()
    except ConfigurationError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    logger.info("tui_session_started", extra={"base_url": args.base_url or env.base_url})
    configure(timeout_seconds=env.timeout_seconds, retry_policy=env.retry_policy)

    app = App(
        prompt=prompt,
        token=args.token or env.token or None,
        base_url=args.base_url,
        default_base_url=env.base_url,
    )
    output = prompt.say if prompt is not None else print
    try:
        return app.run()
    except (KeyboardInterrupt, EOFError):
        output("\n\nBye!")
        return 0


__all__ = ["App", "Prompt", "build_parser", "main"]
