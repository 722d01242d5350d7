from sqlalchemy.ext.asyncio import AsyncSession

from cms.core.config import settings
from cms.db.repositories.job_repository import JobRepository
from cms.domains.jobs.schemas import JobPayload
from cms.domains.resources.access import AccessPolicy
from cms.domains.resources.services import ResourceLabels, ResourceService

JOB_LABELS = ResourceLabels("job", "jobs")


class JobService(ResourceService):
    """Сервис вакансий. Политика изменения задается в настройках."""

    def __init__(self, session: AsyncSession, policy: AccessPolicy = None):
        super().__init__(
            store=JobRepository(session),
            schema=JobPayload,
            labels=JOB_LABELS,
            policy=policy or AccessPolicy(settings.jobs_mutation_policy)
        )
