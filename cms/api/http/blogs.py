from cms.api.http.resources import build_resource_router
from cms.domains.blogs import BLOG_LABELS, BlogResponse, BlogService

router = build_resource_router(
    prefix="/blogs",
    labels=BLOG_LABELS,
    service_factory=BlogService,
    response_schema=BlogResponse,
)
