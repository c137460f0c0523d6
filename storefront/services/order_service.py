# storefront/services/order_service.py
import random
import threading
import time
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Mapping

from storefront.domain.errors import (
    CheckoutInProgressError,
    EmptyCartError,
    SimulatedOrderError,
    ValidationError,
)
from storefront.domain.schemas import OrderForm, OrderResult
from storefront.domain.validation import validate_order_form
from storefront.services.cart_service import CartService
from storefront.services.notification_service import NotificationService
from storefront.utils.settings import CHECKOUT_DELAY_SECONDS, CHECKOUT_FAILURE_RATE
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CheckoutState(str, Enum):
    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    PROCESSING = "PROCESSING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


def new_order_id() -> str:
    return f"FS-{uuid.uuid4().hex[:16].upper()}"


class OrderService:
    """
    Order simulator, kept separate from CartService.
    Validates the checkout form, fakes the order call and empties the cart.
    """

    def __init__(
        self,
        cart_service: CartService,
        notification_service: NotificationService | None = None,
        delay_seconds: float = CHECKOUT_DELAY_SECONDS,
        failure_rate: float = CHECKOUT_FAILURE_RATE,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError("failure_rate must be between 0 and 1")

        self.cart_service = cart_service
        self.notification_service = notification_service or NotificationService()
        self.delay_seconds = delay_seconds
        self.failure_rate = failure_rate
        self.rng = rng or random.Random()
        self.sleep = sleep

        self.state = CheckoutState.IDLE
        self.processing = False
        self.last_order: OrderResult | None = None
        self.last_error: str | None = None
        self._lock = threading.Lock()

    def validate(self, form: OrderForm | Mapping[str, Any]) -> dict[str, str]:
        return validate_order_form(form)

    def place_order(self, form: OrderForm | Mapping[str, Any]) -> OrderResult:
        """
        Use Case: place an order from the current cart.

        1. Rejects a second attempt while one is processing
        2. Validates the form (cart untouched on errors)
        3. Simulates the network call, which may fail when failure_rate > 0
        4. Clears the cart and enqueues the confirmation
        """
        if not isinstance(form, OrderForm):
            form = OrderForm.model_validate({k: "" if v is None else v for k, v in dict(form).items()})

        with self._lock:
            if self.processing:
                raise CheckoutInProgressError("An order is already being placed")
            self.state = CheckoutState.VALIDATING

            errors = self.validate(form)
            if errors:
                self.state = CheckoutState.IDLE
                logger.info(f"Checkout rejected, invalid fields: {sorted(errors)}")
                raise ValidationError(errors)

            if not self.cart_service.items:
                self.state = CheckoutState.IDLE
                raise EmptyCartError("Your cart is empty. Add items before checking out.")

            self.processing = True
            self.state = CheckoutState.PROCESSING

        try:
            self.sleep(self.delay_seconds)

            if self.failure_rate and self.rng.random() < self.failure_rate:
                self.state = CheckoutState.FAILED
                raise SimulatedOrderError("Payment was declined. Please try again.")

            cart = self.cart_service.get_cart()
            order = OrderResult(
                order_id=new_order_id(),
                total=cart["total"],
                item_count=cart["count"],
                items=cart["items"],
                email=form.email.strip(),
                created_at=datetime.now(timezone.utc),
            )

            self.cart_service.clear()
            self.last_order = order
            self.last_error = None
            self.state = CheckoutState.SUCCEEDED
            logger.info(f"Order {order.order_id} placed, total {order.total}")

        except Exception as e:
            self.last_error = str(e)
            self.state = CheckoutState.IDLE
            logger.error(f"Order placement failed: {e}")
            raise

        finally:
            self.processing = False

        self._notify(order)
        return order

    def _notify(self, order: OrderResult) -> None:
        try:
            self.notification_service.send_order_confirmation(order.email, order.order_id)
        except Exception as e:
            # broker may be down, the order itself already succeeded
            logger.warning(f"Confirmation for order {order.order_id} not queued: {e}")
