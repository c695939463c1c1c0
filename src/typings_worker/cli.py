"""Command-line entry point of the worker process."""

import logging
import os
import sys
from pathlib import Path

import click

from typings_worker.config import WorkerConfig
from typings_worker.context import create_context
from typings_worker.worker import install_unhandled_exception_logging, run_worker

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="typings-worker")
@click.option(
    "--globalTypingsCacheLocation",
    "global_cache_location",
    envvar="TYPINGS_WORKER_CACHE",
    required=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory where typings and the types registry are installed.",
)
@click.option(
    "--logFile",
    "log_file",
    envvar="TYPINGS_WORKER_LOG_FILE",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Append diagnostic output to this file. Logging is off when omitted.",
)
@click.option(
    "--npmLocation",
    "npm_location",
    envvar="TYPINGS_WORKER_NPM",
    default=None,
    help="npm executable to use. Defaults to npm found on PATH.",
)
def main(global_cache_location: Path, log_file: Path | None, npm_location: str | None) -> None:
    """Install @types packages on request from a parent language server.

    Requests are read as JSON lines on stdin and responses are written as
    JSON lines on stdout. The worker exits when stdin is closed.
    """
    # stdout carries protocol messages, so debug output goes to stderr
    if os.getenv("TYPINGS_WORKER_DEBUG"):
        logging.basicConfig(
            level=logging.DEBUG,
            format="[DEBUG %(name)s:%(lineno)d] %(message)s",
            stream=sys.stderr,
        )

    config = WorkerConfig(
        global_cache_location=global_cache_location,
        log_file=log_file,
        npm_location=npm_location,
    )
    ctx = create_context(config)
    install_unhandled_exception_logging(ctx.log)
    run_worker(config, ctx)
