from typing import TYPE_CHECKING

from cms.db.models.job import Job as JobModel
from cms.db.repositories.base import SqlAlchemyRepository

if TYPE_CHECKING:
    from cms.domains.jobs.entities import Job


class JobRepository(SqlAlchemyRepository):
    """Репозиторий для работы с вакансиями"""

    model = JobModel
    resource_name = "job"

    def _to_domain(self, db_job: JobModel) -> "Job":
        from cms.domains.jobs.entities import Job

        return Job(
            id=db_job.id,
            title=db_job.title,
            department=db_job.department,
            location=db_job.location,
            type=db_job.type,
            description=db_job.description,
            owner_id=db_job.owner_id,
            created_at=db_job.created_at,
            updated_at=db_job.updated_at
        )
