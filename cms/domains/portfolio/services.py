from sqlalchemy.ext.asyncio import AsyncSession

from cms.core.config import settings
from cms.db.repositories.portfolio_repository import PortfolioRepository
from cms.domains.portfolio.schemas import PortfolioPayload
from cms.domains.resources.access import AccessPolicy
from cms.domains.resources.services import ResourceLabels, ResourceService

PORTFOLIO_LABELS = ResourceLabels("project", "projects")


class PortfolioService(ResourceService):
    """Сервис проектов портфолио. Политика изменения задается в настройках."""

    def __init__(self, session: AsyncSession, policy: AccessPolicy = None):
        super().__init__(
            store=PortfolioRepository(session),
            schema=PortfolioPayload,
            labels=PORTFOLIO_LABELS,
            policy=policy or AccessPolicy(settings.portfolio_mutation_policy)
        )
