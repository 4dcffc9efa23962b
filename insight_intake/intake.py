import logging
import threading
from typing import Any, Callable, Collection, Dict, Iterable, List, Optional

from .errors import InvalidInsightError
from .schemas import Insight
from .validation import ensure_insight, explain_insight

logger = logging.getLogger(__name__)

POLICIES = ("reject", "drop")

Sink = Callable[[Insight], Any]


class InsightIntake:
    """Validates candidate insights before forwarding them to sinks.

    With the ``reject`` policy an invalid candidate raises
    ``InvalidInsightError``; with ``drop`` it is logged, counted and discarded.

    A valid insight is counted as accepted before it is forwarded. If a sink
    raises, the error propagates: sinks registered earlier have already
    received the insight and later ones do not.
    """

    def __init__(self, kinds: Optional[Collection[str]] = None, policy: str = "reject",
                 sinks: Iterable[Sink] = ()):
        if policy not in POLICIES:
            raise ValueError(f"unknown invalid-insight policy '{policy}', expected one of {POLICIES}")
        if isinstance(kinds, str):
            kinds = (kinds,)
        self.kinds = frozenset(kinds) if kinds is not None else None
        self.policy = policy
        self.sinks: List[Sink] = list(sinks)
        self.accepted = 0
        self.dropped = 0
        self._lock = threading.Lock()

    def add_sink(self, sink: Sink) -> None:
        self.sinks.append(sink)

    def submit(self, candidate: Any) -> Optional[Insight]:
        reason = explain_insight(candidate, self.kinds)
        if reason is not None:
            logger.warning("invalid insight (%s): %s", self.policy, reason)
            if self.policy == "reject":
                raise InvalidInsightError(reason)
            with self._lock:
                self.dropped += 1
            return None
        insight = ensure_insight(candidate, self.kinds)
        with self._lock:
            self.accepted += 1
        logger.debug("accepted insight %s/%s", insight.type, insight.event)
        for sink in self.sinks:
            sink(insight)
        return insight

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {"accepted": self.accepted, "dropped": self.dropped}
