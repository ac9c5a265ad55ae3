"""Async recorder that timestamps awaitables and keeps an append-only timeline log."""

from __future__ import annotations

import asyncio
import functools
import inspect
import uuid
from collections.abc import Callable
from typing import Any, Final

from .bullets import LABEL_GLYPH, MISUSE_GLYPH, BulletCycler, default_cycler
from .formatting import format_time
from .logging_utils import get_logger
from .models import Entry, now_ms
from .playback import Playback
from .sinks import LineSink, TableSink, print_table

logger = get_logger(__name__)

NOT_AWAITABLE_ERROR: Final = "Not a promise"

# Called as callback(None, result) on success and callback(error) on failure.
Callback = Callable[..., Any]

_OMITTED: Final = object()


def _describe_error(error: Any) -> str:
    """Normalize a failure to `"<name>: <message>"`, dropping empty parts."""
    if not isinstance(error, BaseException):
        error = Exception(error)
    return ": ".join(part for part in (type(error).__name__, str(error)) if part)


def _resolved(value: Any) -> asyncio.Future[Any]:
    """Return a future on the running loop that is already resolved with `value`."""
    future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
    future.set_result(value)
    return future


class Recorder:
    """Tracks labels, plain values and awaitables on a shared timeline.

    Members:
    - Origin: `origin` (epoch ms at construction; all playback times are relative to it)
    - Log: `log` (read-only snapshot of the append-only entry list)
    - Glyph source: `cycler` (the process-wide `default_cycler` unless one is injected)
    """

    def __init__(self, *, cycler: BulletCycler | None = None, clock: Callable[[], int] = now_ms) -> None:
        """Create an empty recorder.

        Args:
            cycler: Glyph selector; defaults to the shared process-wide cycler.
            clock: Epoch-millisecond clock, injectable for deterministic tests.
        """
        self.cycler = cycler if cycler is not None else default_cycler
        self._clock = clock
        self.origin: int = clock()
        self._log: list[Entry] = []

    @property
    def log(self) -> tuple[Entry, ...]:
        return tuple(self._log)

    def _append(self, entry: Entry) -> None:
        self._log.append(entry)
        logger.debug(
            "timeline %s entry %r (%s, correlation_id=%s)",
            "pending" if entry.is_pending else "terminal",
            entry.label,
            entry.kind,
            entry.correlation_id,
        )

    def track(
        self, label: str, operand: Any = _OMITTED, callback: Callback | None = None
    ) -> asyncio.Future[Any]:
        """Record `operand` under `label` and return a future of its outcome.

        Every append for the call (label, misuse or pending entry) happens here,
        before this returns; awaiting the result is optional for the log.

        - No operand: appends a permanent label marker; the future resolves to None.
        - Non-awaitable operand: appends one terminal "sync-misuse" entry; the
          future resolves to the operand unchanged.
        - Awaitable operand: appends a pending entry now and a terminal entry on
          settlement. The returned future is the operand itself (wrapped by
          `asyncio.ensure_future`), so it settles exactly as the operand does.

        If `callback` raises while recording a settled awaitable, the error is
        logged at WARNING and the terminal entry is kept without data; the
        caller never sees it. On the misuse path the callback runs inside this
        call and its errors propagate, with nothing appended.

        Must be called while an event loop is running.
        """
        start_time = self._clock()
        correlation_id = uuid.uuid4().hex

        if operand is _OMITTED:
            self._append(
                Entry(
                    correlation_id=correlation_id,
                    kind="label",
                    label=label,
                    glyph=LABEL_GLYPH,
                    start_time=start_time,
                )
            )
            return _resolved(None)

        if not inspect.isawaitable(operand):
            end_time = self._clock()
            data = callback(None, operand) if callback is not None else None
            self._append(
                Entry(
                    correlation_id=correlation_id,
                    kind="sync-misuse",
                    label=label,
                    glyph=MISUSE_GLYPH,
                    start_time=start_time,
                    end_time=end_time,
                    success=True,
                    error=NOT_AWAITABLE_ERROR,
                    data=data,
                )
            )
            return _resolved(operand)

        future = asyncio.ensure_future(operand)
        pending = Entry(
            correlation_id=correlation_id,
            kind="async",
            label=label,
            glyph=self.cycler.next(),
            start_time=start_time,
        )
        self._append(pending)

        observer = functools.partial(self._on_settled, pending, callback)
        if future.done():
            # Done callbacks are scheduled, not run; record before handing back the result.
            observer(future)
        else:
            future.add_done_callback(observer)
        return future

    def _on_settled(self, pending: Entry, callback: Callback | None, future: asyncio.Future[Any]) -> None:
        """Append the terminal snapshot for a settled awaitable."""
        end_time = self._clock()
        error: BaseException | None
        if future.cancelled():
            error = asyncio.CancelledError()
        else:
            error = future.exception()

        if error is None:
            update: dict[str, Any] = {"success": True}
            args: tuple[Any, ...] = (None, future.result())
        else:
            update = {"success": False, "error": _describe_error(error)}
            args = (error,)

        if callback is not None:
            try:
                update["data"] = callback(*args)
            except Exception:  # noqa: BLE001 - recording must not change the tracked outcome
                logger.warning("timeline callback for %r raised; data dropped", pending.label, exc_info=True)

        self._append(pending.model_copy(update={"end_time": end_time, **update}))

    def sleep(
        self, duration_ms: int, label: str | None = None, callback: Callback | None = None
    ) -> asyncio.Future[Any]:
        """Sleep for `duration_ms` milliseconds as a tracked operation."""
        if label is None:
            label = f"Sleeping {format_time(int(duration_ms))}"
        return self.track(label, asyncio.sleep(duration_ms / 1000), callback)

    def flush(self) -> None:
        """Empty the log.

        `origin` is kept, and awaitables still in flight will append their
        terminal entry once they settle, without a matching pending entry.
        """
        logger.debug("timeline flush dropping %d entries", len(self._log))
        self._log.clear()

    def play(
        self,
        line_sink: LineSink = print,
        table_sink: TableSink = print_table,
        *,
        show_data: bool = True,
    ) -> None:
        """Render the current log; see `Playback.play`."""
        Playback(self.origin, self._log, show_data=show_data).play(line_sink, table_sink)
