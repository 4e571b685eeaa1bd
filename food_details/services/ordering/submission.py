"""Order submission."""
import logging

from food_details.core.errors import FoodDetailsError, SubmissionError
from food_details.services.backend.base import BackendClient
from food_details.services.ordering.draft import OrderDraft
from food_details.services.ordering.models import OrderPayload

logger = logging.getLogger(__name__)


class OrderSubmissionFlow:
    """Turns a draft into an order on the backend."""

    def __init__(self, backend: BackendClient):
        self.backend = backend

    async def submit(self, draft: OrderDraft) -> OrderPayload:
        """
        Send the draft as a single POST /orders.

        Returns:
            The payload that was sent

        Raises:
            SubmissionError: the backend rejected or never received the order.
                The draft is left as it was and can be submitted again.
        """
        payload = draft.to_payload()
        logger.info(
            f"[SUBMIT] Submitting order - food: {payload.product_id}, "
            f"quantity: {draft.base_quantity}, total: {payload.price}"
        )
        try:
            await self.backend.create_order(payload)
        except FoodDetailsError as e:
            logger.error(
                f"[SUBMIT] Order for food {payload.product_id} failed - "
                f"{type(e).__name__}: {str(e)}"
            )
            raise SubmissionError(f"Order for food {payload.product_id} failed: {e}") from e

        logger.info(f"[SUBMIT] Order for food {payload.product_id} submitted")
        return payload
