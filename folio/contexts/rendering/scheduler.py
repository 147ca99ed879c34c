"""
Animation Scheduler

Deferred bar-fill sweeps. Each sweep is a one-shot asyncio timer that raises
every annotated bar of one kind from its initial width to its target.
Sweeps are never cancelled and never retried.
"""

import asyncio
from typing import List, Optional

from folio.contexts.rendering.logger import _log_debug
from folio.contexts.rendering.markup_classes import BarClasses


class AnimationScheduler:
    """
    Schedules sweeps on the running event loop.

    Args:
        surface: Surface whose bars are swept
        loop: Event loop to schedule on (default: the running loop at schedule time)
    """

    def __init__(self, surface, loop: Optional[asyncio.AbstractEventLoop] = None):
        self.surface = surface
        self.loop = loop
        self._pending: List[asyncio.Future] = []

    @property
    def pending_sweeps(self) -> int:
        return sum(1 for fired in self._pending if not fired.done())

    def schedule_sweep(self, bar_class: str, delay_s: float) -> None:
        """
        Schedule one sweep of `bar_class` bars after `delay_s` seconds.

        Independent of any sweep already pending for the same bars.
        """
        loop = self.loop or asyncio.get_running_loop()
        # Drop sweeps that already fired cleanly; failed ones stay for drain() to raise
        self._pending = [
            pending
            for pending in self._pending
            if not pending.done() or pending.exception() is not None
        ]
        fired = loop.create_future()
        loop.call_later(delay_s, self._fire, bar_class, fired)
        self._pending.append(fired)
        _log_debug(f"Scheduled {bar_class} sweep in {delay_s}s")

    def _fire(self, bar_class: str, fired: asyncio.Future) -> None:
        try:
            count = self.sweep(bar_class)
        except Exception as e:
            fired.set_exception(e)
            return
        fired.set_result(count)

    def sweep(self, bar_class: str) -> int:
        """
        Set every `bar_class` bar's width to its recorded target.

        Returns:
            Number of bars updated
        """
        bars = self.surface.select_all(f".{bar_class}[{BarClasses.VALUE_ATTR}]")
        for bar in bars:
            bar["style"] = f"width: {bar[BarClasses.VALUE_ATTR]}%"
        _log_debug(f"Swept {len(bars)} {bar_class} bars")
        return len(bars)

    async def drain(self) -> None:
        """Wait until every sweep scheduled so far (and any scheduled meanwhile) has fired."""
        while self._pending:
            pending, self._pending = self._pending, []
            await asyncio.gather(*pending)
