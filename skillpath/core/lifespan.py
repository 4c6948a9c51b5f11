from contextlib import asynccontextmanager
import logging

from skillpath.ai.completion import ai_enabled
from skillpath.features.career_rules import load_rule_table

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    table = load_rule_table()
    logger.info(
        "career_rules_loaded rules=%s default=%s ai_enabled=%s",
        len(table.rules),
        table.default.career,
        ai_enabled(),
    )
    yield
