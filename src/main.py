"""Demo entrypoint recording a few overlapping operations and playing them back.

This module is a small, end-to-end "smoke test" that:

- Loads configuration from environment.
- Tracks labels, a plain value, concurrent sleeps and a failing operation.
- Plays the resulting timeline to stdout.

It is **not** part of the library surface; run it with `python src/main.py`.
"""

from __future__ import annotations

import asyncio
from contextlib import suppress

from config import load_config
from timeline import BulletCycler, Recorder
from timeline.logging_utils import get_logger, setup_logging

logger = get_logger(__name__)


async def _fetch(name: str, delay_s: float) -> dict[str, object]:
    """Pretend to fetch a record after `delay_s` seconds."""
    await asyncio.sleep(delay_s)
    return {"name": name, "delay_s": delay_s}


async def _explode(delay_s: float) -> None:
    await asyncio.sleep(delay_s)
    raise RuntimeError("upstream unavailable")


async def run_demo() -> None:
    """Record a short, overlapping workload and play it back."""
    cfg = load_config().timeline
    setup_logging(cfg.log_level)

    cycler = BulletCycler(cfg.bullets) if cfg.bullets else None
    recorder = Recorder(cycler=cycler)
    base_s = cfg.demo_sleep_ms / 1000

    await recorder.track("Demo start")
    await recorder.track("Config snapshot", cfg.model_dump(), lambda _err, value: value)

    # The slower fetch is tracked first but settles last.
    await asyncio.gather(
        recorder.track("Fetch slow", _fetch("slow", base_s * 2), lambda err, result=None: result),
        recorder.track("Fetch fast", _fetch("fast", base_s / 2)),
        recorder.sleep(cfg.demo_sleep_ms),
    )

    with suppress(RuntimeError):
        await recorder.track("Flaky call", _explode(base_s / 4), lambda err, result=None: {"error": repr(err)})

    await recorder.track("Demo end")
    logger.info("demo recorded %d entries", len(recorder.log))
    recorder.play(show_data=cfg.show_data)


def main() -> None:
    """CLI entrypoint for running the demo with `python src/main.py`."""
    asyncio.run(run_demo())


if __name__ == "__main__":
    main()
