from sqlalchemy.ext.asyncio import AsyncSession

from cms.db.repositories.blog_repository import BlogRepository
from cms.domains.blogs.schemas import BlogPayload
from cms.domains.resources.access import AccessPolicy
from cms.domains.resources.services import ResourceLabels, ResourceService

BLOG_LABELS = ResourceLabels("blog", "blogs")


class BlogService(ResourceService):
    """Сервис для работы с записями блога. Изменять может только автор."""

    def __init__(self, session: AsyncSession):
        super().__init__(
            store=BlogRepository(session),
            schema=BlogPayload,
            labels=BLOG_LABELS,
            policy=AccessPolicy.OWNER
        )
