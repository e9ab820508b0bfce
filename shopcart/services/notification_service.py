# shopcart/services/notification_service.py
from typing import Protocol

from shopcart.celery_worker import celery_app
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


class Notifier(Protocol):
    def error(self, message: str) -> None: ...


class NotificationService:
    """
    Powiadomienia dla użytkownika (toast), tylko błędy.
    Fire-and-forget przez Celery, błąd wysyłki nie wpływa na koszyk.
    """

    def error(self, message: str) -> None:
        try:
            # bez ponawiania publikacji, niedostępny broker nie trzyma wywołującego
            send_cart_notification_task.apply_async(("error", message), retry=False)
        except Exception as e:
            logger.warning(f"Nie udało się wysłać powiadomienia '{message}': {e}")


@celery_app.task(name="shopcart.services.notification_service.send_cart_notification_task")
def send_cart_notification_task(level: str, message: str):
    """
    Celery task - w prawdziwym systemie wysłałby toast/push do UI.
    Teraz tylko loguje.
    """
    logger.info(f"[NOTIFICATION] {level}: {message}")

    return {"level": level, "message": message, "status": "sent"}
