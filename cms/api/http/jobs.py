from cms.api.http.resources import build_resource_router
from cms.domains.jobs import JOB_LABELS, JobResponse, JobService

router = build_resource_router(
    prefix="/jobs",
    labels=JOB_LABELS,
    service_factory=JobService,
    response_schema=JobResponse,
)
