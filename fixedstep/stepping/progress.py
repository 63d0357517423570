"""Throttled progress notifications."""

import logging
from typing import Optional

from fixedstep.config import get_progress_increment
from fixedstep.core.problem import ProgressCallback

logger = logging.getLogger(__name__)


class ProgressReporter:
    """
    Forwards the completed fraction of a run to an optional callback.

    A notification is sent only once the fraction exceeds the current
    cutoff, after which the cutoff moves up by one increment. Failures in
    the callback are logged and never reach the integration.
    """

    def __init__(
        self,
        total: int,
        callback: Optional[ProgressCallback] = None,
        increment: Optional[float] = None,
    ) -> None:
        self.total = total
        self.callback = callback
        self.increment = get_progress_increment() if increment is None else increment
        self._cutoff = self.increment

    def update(self, n: int) -> None:
        """Report that n of total steps are complete."""
        if self.callback is None:
            return

        fraction = n / self.total
        if fraction > self._cutoff:
            try:
                self.callback(fraction)
            except Exception:
                logger.warning(
                    "Progress callback failed at %.0f%%", 100 * fraction,
                    exc_info=True,
                )
            self._cutoff += self.increment
