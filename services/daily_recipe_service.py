"""Recipe of the day lookup with most-recent fallback."""

from typing import Any, Optional
from models.database import BackendClient
from utils.errors import BackendError, NotFoundError
from utils.helpers import utc_today
from utils.logger import setup_logger

logger = setup_logger(__name__)


async def get_recipe_of_the_day(backend: BackendClient, today: Optional[str] = None) -> Any:
    """Return today's recipe payload, or the most recent one if today has none.

    The payload is returned unmodified, so a fallback recipe looks exactly like
    today's. Raises ``NotFoundError`` when no recipe exists at all and
    ``BackendError`` when the fallback query itself fails.
    """
    today = today or utc_today()

    recipe = None
    try:
        recipe = await backend.get_daily_recipe(today)
    except BackendError as e:
        logger.error(f"Error fetching recipe for {today}: {e.details}")

    if recipe is not None:
        return recipe

    logger.info(f"No recipe for {today}, falling back to the most recent one")
    recipe = await backend.get_latest_daily_recipe()

    if recipe is None:
        raise NotFoundError("No recipe available")
    return recipe
