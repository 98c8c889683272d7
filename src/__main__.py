"""Run the spot termination exporter.

Usage:
    python -m src [--listen-port 9189] [--metrics-path /metrics] ...

Flags override environment variables, which override defaults. A .env
file in the working directory is loaded first.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from collections.abc import Sequence

import uvicorn
from dotenv import load_dotenv

from src import __version__
from src.api.main import create_app
from src.bootstrap import build_termination_exporter, configure_logging
from src.config.exporter_config import ExporterConfig
from src.domain.errors.configuration import ConfigurationError
from src.infrastructure.observability import get_logger_for_service


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spot-termination-exporter",
        description="Expose spot instance termination notices as Prometheus metrics.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--listen-host", dest="listen_host", help="Address to bind")
    parser.add_argument("--listen-port", dest="listen_port", type=int, help="Port to bind")
    parser.add_argument(
        "--metrics-path", dest="metrics_path", help="Path serving the metrics"
    )
    parser.add_argument(
        "--metadata-url", dest="metadata_url", help="instance-action endpoint to probe"
    )
    parser.add_argument(
        "--timeout",
        dest="timeout_seconds",
        type=float,
        help="Probe request timeout in seconds",
    )
    parser.add_argument(
        "--environment",
        dest="environment",
        help="'production' for JSON logs, anything else for console logs",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> ExporterConfig:
    """Merge command-line flags over the environment configuration."""
    config = ExporterConfig.from_environment()
    overrides = {
        field.name: getattr(args, field.name)
        for field in dataclasses.fields(ExporterConfig)
        if getattr(args, field.name, None) is not None
    }
    return dataclasses.replace(config, **overrides) if overrides else config


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        config = resolve_config(args)
    except ConfigurationError as exc:
        print(f"spot-termination-exporter: {exc}", file=sys.stderr)
        return 2

    configure_logging(config)
    log = get_logger_for_service("spot-termination-exporter", component="startup")
    log.info("exporter_starting", listen_host=config.listen_host, listen_port=config.listen_port)

    termination_exporter = build_termination_exporter(config)
    app = create_app(termination_exporter)
    uvicorn.run(app, host=config.listen_host, port=config.listen_port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
