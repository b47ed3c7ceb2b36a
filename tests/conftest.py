"""
Pytest fixtures for the bookstore kernel test suite.

Provides:
- A temporary data directory per test
- Kernels over the TSV and SQLite storage backends
- A ``run`` helper that feeds command lines and collects printed output
- Structured log capture
"""

import json
import logging
from io import StringIO

import pytest

from bookstore_config.schema import BookstoreConfig, StorageConfig
from bookstore_kernel.kernel import BookstoreKernel, build_kernel
from bookstore_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from bookstore_kernel.storage import SqlRecordStorage, TsvRecordStorage


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture bookstore_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, run):
            run("su root sjtu")
            logs = captured_logs()
            assert any(r["message"] == "session_pushed" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("bookstore_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Storage and kernel fixtures
# =============================================================================


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def tsv_storage(data_dir):
    return TsvRecordStorage(data_dir)


@pytest.fixture
def sql_storage(tmp_path):
    storage = SqlRecordStorage(f"sqlite:///{tmp_path / 'bookstore.db'}")
    yield storage
    storage.close()


@pytest.fixture
def config(data_dir) -> BookstoreConfig:
    return BookstoreConfig(storage=StorageConfig(backend="tsv", data_dir=data_dir))


@pytest.fixture
def kernel(config):
    k = build_kernel(config)
    yield k
    k.close()


@pytest.fixture
def reopen(config):
    """Build a fresh kernel over the same data directory (simulates a restart)."""
    opened: list[BookstoreKernel] = []

    def _reopen() -> BookstoreKernel:
        k = build_kernel(config)
        opened.append(k)
        return k

    yield _reopen
    for k in opened:
        k.close()


def run_lines(k: BookstoreKernel, *lines: str) -> list[str]:
    """Execute each line and return everything it would have printed."""
    output: list[str] = []
    for line in lines:
        result = k.execute_line(line)
        if result is not None:
            output.extend(result.lines)
    return output


@pytest.fixture
def run(kernel):
    def _run(*lines: str) -> list[str]:
        return run_lines(kernel, *lines)

    return _run


@pytest.fixture
def as_root(run):
    """Log in as the bootstrap owner before the test body runs."""
    assert run("su root sjtu") == []
    return run
