# app/services/notification_service.py
from app.celery_worker import celery_app
from app.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Serwis do wysyłania powiadomień.
    Używa Celery do asynchronicznego przetwarzania.
    """

    @staticmethod
    def send_order_notification(user_id: str, order_id: str):
        """
        Wysyła powiadomienie o złożeniu zamówienia.
        Blad brokera nie cofa zamowienia - jest juz zapisane.
        """
        try:
            send_order_notification_task.delay(user_id, order_id)
        except Exception as e:
            logger.error(f"Nie udalo sie zakolejkowac powiadomienia dla zamowienia {order_id}: {e}")


@celery_app.task(name="app.services.notification_service.send_order_notification_task")
def send_order_notification_task(user_id: str, order_id: str):
    """
    Celery task - w prawdziwym systemie wysłałby email/SMS/push.
    Teraz tylko loguje.
    """
    logger.info(f"[NOTIFICATION] User {user_id}: Order {order_id} has been placed")

    return {"user_id": user_id, "order_id": order_id, "status": "sent"}
