"""
Command loop and process entry point.

Reads one command per line from stdin, writes each output line followed by
a newline to stdout, and stops at ``quit``, ``exit`` or end of input.
Structured logs go to stderr (or to the configured file), never to stdout.

Usage:
    bookstore [--config FILE] [--data-dir DIR] [--backend tsv|sql] [--log-level LEVEL]
"""

from __future__ import annotations

import argparse
import dataclasses
import io
import logging
import sys
from pathlib import Path
from typing import TextIO

from bookstore_config import get_active_config
from bookstore_config.schema import LOG_LEVELS, STORAGE_BACKENDS, BookstoreConfig
from bookstore_kernel.kernel import BookstoreKernel, build_kernel
from bookstore_kernel.logging_config import configure_logging


class _FlushingFileHandler(logging.FileHandler):
    """FileHandler that flushes after every emit."""

    def emit(self, record: logging.LogRecord) -> None:
        super().emit(record)
        self.flush()


def run_shell(kernel: BookstoreKernel, stdin: TextIO, stdout: TextIO) -> None:
    for line in stdin:
        result = kernel.execute_line(line)
        if result is None:
            continue
        for text in result.lines:
            stdout.write(text + "\n")
        if result.terminate:
            break
    stdout.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bookstore", description="Bookstore command shell")
    parser.add_argument("--config", type=Path, default=None, help="YAML file overriding the defaults")
    parser.add_argument("--data-dir", type=Path, default=None, help="Directory holding the record files")
    parser.add_argument("--backend", choices=STORAGE_BACKENDS, default=None)
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None)
    return parser


def apply_overrides(config: BookstoreConfig, args: argparse.Namespace) -> BookstoreConfig:
    """Command-line options win over file configuration."""
    storage = config.storage
    if args.data_dir is not None:
        storage = dataclasses.replace(storage, data_dir=args.data_dir)
    if args.backend is not None:
        storage = dataclasses.replace(storage, backend=args.backend)
    log_config = config.logging
    if args.log_level is not None:
        log_config = dataclasses.replace(log_config, level=args.log_level)
    return dataclasses.replace(config, storage=storage, logging=log_config)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = apply_overrides(get_active_config(args.config), args)

    handler = None
    if config.logging.file is not None:
        handler = _FlushingFileHandler(str(config.logging.file), mode="a")
    configure_logging(level=getattr(logging, config.logging.level), handler=handler)

    # undecodable input bytes must not end the loop
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(encoding="utf-8", errors="replace")
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(errors="replace")

    with build_kernel(config) as kernel:
        run_shell(kernel, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
