"""
In-process output stream for ingested payloads
"""

import queue
import threading
from typing import Callable, List

from ..utils.logging_utils import get_logger

logger = get_logger(__name__)

Subscriber = Callable[[str], None]


class Subscription:
    """Handle returned by PayloadStream.subscribe"""
    
    def __init__(self, stream: 'PayloadStream', callback: Subscriber):
        self._stream = stream
        self.callback = callback
        self.active = True
    
    def unsubscribe(self):
        """Stop receiving payloads. Safe to call more than once."""
        if self.active:
            self._stream._remove(self)
            self.active = False


class PayloadStream:
    """Single-producer, multi-consumer channel of decoded drop-file contents.
    
    Payloads are delivered synchronously, in publish order, to every
    subscriber registered at the time of publishing. The stream never
    completes on its own; slow subscribers delay the producer.
    """
    
    def __init__(self):
        self._subscriptions: List[Subscription] = []
        self._lock = threading.Lock()
        self.published_count = 0
    
    def subscribe(self, callback: Subscriber) -> Subscription:
        """Register a callback that receives every future payload"""
        subscription = Subscription(self, callback)
        with self._lock:
            self._subscriptions.append(subscription)
        return subscription
    
    def listen(self) -> 'queue.Queue[str]':
        """Subscribe a queue for pull-style consumers and return it"""
        payloads: 'queue.Queue[str]' = queue.Queue()
        self.subscribe(payloads.put)
        return payloads
    
    def publish(self, payload: str):
        """Deliver a payload to all current subscribers"""
        with self._lock:
            subscriptions = list(self._subscriptions)
            self.published_count += 1
        
        for subscription in subscriptions:
            try:
                subscription.callback(payload)
            except Exception:
                # A failing consumer must not stop delivery to the others
                logger.exception("Subscriber %r failed to handle payload", subscription.callback)
    
    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)
    
    def _remove(self, subscription: Subscription):
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)
