import argparse
import logging

import uvicorn

from app.core.config import settings

logger = logging.getLogger("app")

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve the social feed API with uvicorn")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind (default: 8000)")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on code changes (always on when DEBUG is set)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker processes (default: 1, ignored with --reload)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=settings.LOG_LEVEL.lower(),
        help="uvicorn log level (default: LOG_LEVEL setting)",
    )
    return parser


def server_options(args: argparse.Namespace) -> dict:
    """Keyword arguments for uvicorn.run"""
    if args.workers < 1:
        raise ValueError("--workers must be at least 1")
    reload = args.reload or settings.DEBUG
    return {
        "host": args.host,
        "port": args.port,
        "reload": reload,
        # uvicorn cannot combine reload with several workers
        "workers": 1 if reload else args.workers,
        "log_level": args.log_level,
    }


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        options = server_options(args)
    except ValueError as e:
        parser.error(str(e))

    logger.info(
        f"Serving on {options['host']}:{options['port']} "
        f"({settings.ENVIRONMENT}, reload={options['reload']}, workers={options['workers']})"
    )
    uvicorn.run("app.main:app", **options)


if __name__ == "__main__":
    main()
