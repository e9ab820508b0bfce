# shopcart/celery_worker.py
from celery import Celery

from shopcart.utils.settings import (
    CELERY_BROKER_URL,
    CELERY_BROKER_CONNECTION_TIMEOUT,
    CELERY_RESULT_BACKEND,
    CELERY_TASK_ALWAYS_EAGER,
)

celery_app = Celery(
    "shopcart",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# taski muszą być zaimportowane, żeby Celery je zarejestrował
celery_app.conf.imports = (
    "shopcart.services.notification_service",
)

celery_app.conf.task_always_eager = CELERY_TASK_ALWAYS_EAGER
# powiadomienia są fire-and-forget, krótki timeout połączenia z brokerem
celery_app.conf.broker_connection_timeout = CELERY_BROKER_CONNECTION_TIMEOUT
celery_app.conf.timezone = "UTC"
