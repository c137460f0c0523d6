# storefront/main.py
import uvicorn

from storefront.api import create_app
from storefront.utils.logging import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)

app = create_app()
logger.info("Storefront service initialized")


if __name__ == "__main__":
    uvicorn.run("storefront.main:app", host="0.0.0.0", port=8000, reload=False)
