from __future__ import annotations

import logging
from dataclasses import dataclass

from returns.result import Failure, Result, Success

from cafeteria_api.core.domain.model.errors import CafeError, PublishError
from cafeteria_api.core.ports.outbound.events import EventPublisher, OrderPlaced

logger = logging.getLogger(__name__)


@dataclass
class LoggingEventPublisher(EventPublisher):
    fail: bool = False

    def publish(self, event: OrderPlaced) -> Result[None, CafeError]:
        if self.fail:
            return Failure(PublishError(message="publisher is down"))
        logger.info(
            "[event] order_placed: id=%s total=%s lines=%d",
            event.order_id.value,
            event.total.amount,
            event.line_count,
        )
        return Success(None)
