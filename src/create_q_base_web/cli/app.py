"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import logging
import sys

from create_q_base_web.exceptions import ScaffoldError, TemplateError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    import create_q_base_web.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    options = cli.ScaffoldOptions.from_namespace(args)
    settings = cli.ScaffoldSettings.from_environ()
    orchestrator = cli.ScaffoldOrchestrator(settings, cli.QuestionaryPrompter(), cli.RichScaffoldReporter())

    try:
        return orchestrator.run(options)
    except TemplateError as exc:
        logger.debug("template error", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (ScaffoldError, OSError) as exc:
        logger.debug("scaffold failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
