"""Concurrent ingestion of text command sources into a social network.

Each source is read sequentially by its own worker. Workers share a single
:class:`SerializedApplier`, which holds one lock for exactly the duration of
one command. Workers may therefore interleave at command granularity and at
no finer grain.

Ingestion is isolated per source: an unreadable source is logged, recorded
in the :class:`IngestionReport` and skipped without disturbing its siblings.
"""
from __future__ import annotations

from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Sequence, Union
import logging
import threading

from commands import Command, parse_command

if TYPE_CHECKING:
    from social_network import SocialNetwork

Source = Union[str, "PathLike[str]"]

logger = logging.getLogger(__name__)


class SerializedApplier:
    """Applies commands to a network one at a time under a single lock.

    The lock is acquired in :meth:`apply`, held while exactly one command
    runs, and released before :meth:`apply` returns.
    """

    def __init__(self, network: SocialNetwork, lock: Optional[threading.Lock] = None) -> None:
        self._network = network
        self._lock = lock if lock is not None else threading.Lock()
        self._applied = 0

    @property
    def lock(self) -> threading.Lock:
        return self._lock

    @property
    def applied(self) -> int:
        """Number of commands applied so far."""
        return self._applied

    def apply(self, command: Command) -> bool:
        with self._lock:
            changed = command.apply(self._network)
            self._applied += 1
        return changed


@dataclass
class SourceReport:
    """Outcome of ingesting one source."""

    source: str
    applied: int = 0
    changed: int = 0
    skipped: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class IngestionReport:
    """Per-source outcomes, in the order the sources were given."""

    sources: List[SourceReport] = field(default_factory=list)

    @property
    def applied(self) -> int:
        return sum(s.applied for s in self.sources)

    @property
    def failed(self) -> List[SourceReport]:
        return [s for s in self.sources if not s.ok]


def ingest_source(source: Source, applier: SerializedApplier, encoding: str = "utf-8") -> SourceReport:
    """Read one source line by line and apply each parsed command.

    Blank lines are ignored; any other line that does not parse counts as
    skipped. A source that cannot be opened or decoded, or whose command
    fails to apply, stops at that point and reports the error instead of
    raising. ``applied`` only counts commands that completed.
    """
    report = SourceReport(source=str(source))
    try:
        with Path(source).open(encoding=encoding) as handle:
            for line_no, line in enumerate(handle, start=1):
                command = parse_command(line)
                if command is None:
                    if line.strip():
                        report.skipped += 1
                        logger.debug("%s:%d: skipped unparsable line %r", source, line_no, line.rstrip())
                    continue
                try:
                    changed = applier.apply(command)
                except Exception as exc:
                    report.error = f"line {line_no}: {exc}"
                    logger.warning("stopping source %s at line %d: %s", source, line_no, exc)
                    return report
                report.applied += 1
                if changed:
                    report.changed += 1
    except (OSError, UnicodeDecodeError) as exc:
        report.error = str(exc)
        logger.warning("skipping source %s: %s", source, exc)
    return report


def ingest_sources(
    sources: Sequence[Source],
    network: SocialNetwork,
    max_workers: Optional[int] = None,
    encoding: str = "utf-8",
    executor: Optional[Executor] = None,
    applier: Optional[SerializedApplier] = None,
) -> IngestionReport:
    """Ingest every source concurrently and wait for all of them.

    Parameters
    ----------
    sources:
        Paths of text files holding one command per line. Must not be None.
    network:
        Network the commands are applied to.
    max_workers:
        Upper bound on concurrent workers when an internal
        :class:`ThreadPoolExecutor` is used. ``None`` uses the executor default.
    encoding:
        Text encoding used to read every source.
    executor:
        Optional external executor. When provided, ``max_workers`` is ignored
        and the caller owns its lifetime; this call still waits for every
        submitted source before returning.
    applier:
        Optional shared applier, e.g. to serialize several ingestion calls
        against one network. A fresh one is created when omitted.

    Returns once no worker can mutate ``network`` any more.
    """
    if sources is None:
        raise ValueError("sources must not be None")

    sources = list(sources)
    if applier is None:
        applier = SerializedApplier(network)
    logger.info("ingesting %d source(s)", len(sources))

    if not sources:
        return IngestionReport()

    if executor is None:
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="ingest") as pool:
            futures = _submit_all(pool, sources, applier, encoding)
    else:
        futures = _submit_all(executor, sources, applier, encoding)
        wait(futures)

    report = IngestionReport()
    for source, future in zip(sources, futures):
        try:
            report.sources.append(future.result())
        except Exception as exc:
            logger.warning("worker for source %s failed: %s", source, exc)
            report.sources.append(SourceReport(source=str(source), error=str(exc)))

    logger.info(
        "ingested %d command(s) from %d source(s), %d failed",
        report.applied,
        len(report.sources),
        len(report.failed),
    )
    return report


def _submit_all(
    executor: Executor,
    sources: Sequence[Source],
    applier: SerializedApplier,
    encoding: str,
) -> List[Future]:
    return [executor.submit(ingest_source, source, applier, encoding) for source in sources]
