# storefront/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

CATALOG_API_URL = os.getenv("CATALOG_API_URL", "https://fakestoreapi.com")
CATALOG_TIMEOUT_SECONDS = float(os.getenv("CATALOG_TIMEOUT_SECONDS", 5))

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./storefront.db")
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/1")
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/2")

# sql | redis | memory
CART_STORAGE_BACKEND = os.getenv("CART_STORAGE_BACKEND", "sql")
CART_STORAGE_KEY = os.getenv("CART_STORAGE_KEY", "cart:v1")

CHECKOUT_DELAY_SECONDS = float(os.getenv("CHECKOUT_DELAY_SECONDS", 0.9))
CHECKOUT_FAILURE_RATE = float(os.getenv("CHECKOUT_FAILURE_RATE", 0.0))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
