# storefront/services/notification_service.py
from storefront.celery_worker import celery_app
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Sends order confirmations.
    Uses Celery for asynchronous processing.
    """

    @staticmethod
    def send_order_confirmation(email: str, order_id: str):
        send_order_confirmation_task.delay(email, order_id)


@celery_app.task(name="storefront.services.notification_service.send_order_confirmation_task")
def send_order_confirmation_task(email: str, order_id: str):
    """
    Celery task: a real shop would send an email here.
    For now it only logs.
    """
    logger.info(f"[CONFIRMATION] Order {order_id} confirmation sent to {email or 'unknown recipient'}")

    return {"email": email, "order_id": order_id, "status": "sent"}
