# shopcart/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

CATALOG_SERVICE_URL = os.getenv("CATALOG_SERVICE_URL", "http://catalog-service:3333")
CATALOG_TIMEOUT_SECONDS = float(os.getenv("CATALOG_TIMEOUT_SECONDS", 2))
REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")
CART_STORAGE_BACKEND = os.getenv("CART_STORAGE_BACKEND", "redis")
CART_STORAGE_KEY = os.getenv("CART_STORAGE_KEY", "@RocketShoes:cart")
CART_STORAGE_DIR = os.getenv("CART_STORAGE_DIR", ".cart")
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://redis:6379/1")
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://redis:6379/2")
CELERY_BROKER_CONNECTION_TIMEOUT = float(os.getenv("CELERY_BROKER_CONNECTION_TIMEOUT", 1))
CELERY_TASK_ALWAYS_EAGER = os.getenv("CELERY_TASK_ALWAYS_EAGER", "false").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
