from cms.domains.jobs.entities import Job
from cms.domains.jobs.schemas import JobPayload, JobResponse
from cms.domains.jobs.services import JOB_LABELS, JobService

__all__ = ["Job", "JobPayload", "JobResponse", "JOB_LABELS", "JobService"]
