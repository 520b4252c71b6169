"""Profiling sessions written in the Chrome trace event format."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import IO

_THREAD_ID_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class ProfileResult:
    """One timed scope: start and end in microseconds."""

    name: str
    start: int
    end: int
    thread_id: int


class Instrumentor:
    """Writes profile results of one session at a time into a JSON file."""

    def __init__(self) -> None:
        self._session_name: str | None = None
        self._stream: IO[str] | None = None
        self._profile_count = 0
        self._lock = threading.Lock()

    @property
    def session_name(self) -> str | None:
        return self._session_name

    def begin_session(self, name: str, filepath: str = "results.json") -> None:
        """Open ``filepath`` and start a session; a session still open is ended first."""
        if self._stream is not None:
            self.end_session()
        self._stream = open(filepath, "w", encoding="utf-8")
        self._write('{"otherData": {},"traceEvents":[')
        self._session_name = name

    def end_session(self) -> None:
        """Finish the file and close the session; does nothing without one."""
        if self._stream is None:
            return
        self._write("]}")
        self._stream.close()
        self._stream = None
        self._session_name = None
        self._profile_count = 0

    def write_profile(self, result: ProfileResult) -> None:
        """Append one trace event to the open session."""
        with self._lock:
            if self._stream is None:
                return
            separator = "," if self._profile_count > 0 else ""
            self._profile_count += 1
            name = result.name.replace('"', "'")
            self._write(
                f"{separator}{{"
                f'"cat":"function",'
                f'"dur":{result.end - result.start},'
                f'"name":"{name}",'
                f'"ph":"X",'
                f'"pid":0,'
                f'"tid":{result.thread_id},'
                f'"ts":{result.start}'
                f"}}"
            )

    def _write(self, text: str) -> None:
        assert self._stream is not None
        self._stream.write(text)
        self._stream.flush()


_instance = Instrumentor()


def get_instrumentor() -> Instrumentor:
    """The process-wide instrumentor."""
    return _instance


def _now_us() -> int:
    return time.perf_counter_ns() // 1000


class InstrumentationTimer:
    """Times a scope from construction until ``stop`` or the end of a ``with`` block."""

    def __init__(self, name: str, instrumentor: Instrumentor | None = None) -> None:
        self.name = name
        self._instrumentor = instrumentor or _instance
        self._start = _now_us()
        self.stopped = False

    def stop(self) -> None:
        """Record the elapsed time; later calls do nothing."""
        if self.stopped:
            return
        end = _now_us()
        thread_id = threading.get_ident() & _THREAD_ID_MASK
        self._instrumentor.write_profile(
            ProfileResult(self.name, self._start, end, thread_id)
        )
        self.stopped = True

    def __enter__(self) -> InstrumentationTimer:
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()


def profile_scope(name: str) -> InstrumentationTimer:
    """A timer reporting to the process-wide instrumentor, for use in ``with``."""
    return InstrumentationTimer(name)