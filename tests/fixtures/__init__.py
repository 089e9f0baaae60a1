"""Shared test fixtures for the yake test suite.

Available Fixtures
==================

Documents (from tests/fixtures/documents.py)
--------------------------------------------

Functions:
    build_sample_document: The reference target tree used across the suite:
        ``base`` (callable), ``test`` (callable, depends on base) and
        ``group`` (group) holding ``group.sub`` (callable, depends on base),
        with root env ``BASE=BASEVAL``.

Fixtures:
    sample_document: A fresh ``build_sample_document()`` per test.
    runnable_yakefile_yaml: Yakefile text whose callables all ``echo``.
    runnable_document: ``runnable_yakefile_yaml`` parsed into a Document.
    write_yakefile: Factory writing Yakefile text into a directory.

Runners (from tests/fixtures/runners.py)
----------------------------------------

Classes:
    RecordingRunner: CommandRunner fake recording (command, env) calls, with
        configurable per-command results and errors.

Fixtures:
    recording_runner: A fresh RecordingRunner.
    captured_consoles: (stdout, stderr) Rich consoles writing to StringIO.

Example:
    >>> def test_runs_base_first(runnable_document, recording_runner):
    ...     executor = TargetExecutor(runnable_document, runner=recording_runner)
    ...     executor.execute("test")
    ...     assert recording_runner.commands[0] == 'echo "i am base"'
"""

from __future__ import annotations

from tests.fixtures.documents import (
    build_sample_document,
    runnable_document,
    runnable_yakefile_yaml,
    sample_document,
    write_yakefile,
)
from tests.fixtures.runners import (
    RecordingRunner,
    captured_consoles,
    recording_runner,
)

__all__ = [
    # Documents
    "build_sample_document",
    "runnable_document",
    "runnable_yakefile_yaml",
    "sample_document",
    "write_yakefile",
    # Runners
    "RecordingRunner",
    "captured_consoles",
    "recording_runner",
]
