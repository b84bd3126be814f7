import logging
from collections import deque
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple

import simpy

logger = logging.getLogger(__name__)


class MessageBroker:
    """
    Mediates communication between components within the simulation.
    Implements a topic-based publish-subscribe model.

    Delivery is synchronous: publish() runs every subscriber of the topic,
    in subscription order, before it returns. A subscriber may publish in
    turn; nested deliveries complete before the outer publish continues.
    """
    DEFAULT_HISTORY_LIMIT = 10000

    def __init__(self, env: simpy.Environment, history_limit: Optional[int] = DEFAULT_HISTORY_LIMIT):
        """
        Initialize the message broker

        Args:
            env (simpy.Environment): SimPy environment
            history_limit (int): Most recent publishes kept in history (None keeps all, 0 keeps none)
        """
        self.env = env
        self.topics: Dict[str, List[Callable]] = {}  # Subscribers per topic
        self.history: Deque[Tuple[float, str, tuple]] = deque(maxlen=history_limit)  # (time, topic, args), newest last
        self.published_count = 0  # Every publish, including those dropped from history

    def subscribe(self, topic: str, callback: Callable):
        """
        Register a callback for the specified topic
        """
        self.topics.setdefault(topic, []).append(callback)

    def publish(self, topic: str, *args: Any) -> int:
        """
        Publish a message to the specified topic

        Returns:
            Number of subscribers that received the message
        """
        logger.debug("%.2f [Broker] Publish on '%s': %s", self.env.now, topic, args)
        self.history.append((self.env.now, topic, args))
        self.published_count += 1
        subscribers = list(self.topics.get(topic, ()))
        for callback in subscribers:
            callback(*args)
        return len(subscribers)

    def get_current_time(self) -> float:
        """
        Get current simulation time

        This method provides time abstraction, allowing the host entities
        to stamp messages without direct dependency on the SimPy environment.

        Returns:
            Current simulation time
        """
        return self.env.now
