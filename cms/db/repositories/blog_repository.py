from typing import TYPE_CHECKING

from cms.db.models.blog import Blog as BlogModel
from cms.db.repositories.base import SqlAlchemyRepository

if TYPE_CHECKING:
    from cms.domains.blogs.entities import Blog


class BlogRepository(SqlAlchemyRepository):
    """Репозиторий для работы с записями блога"""

    model = BlogModel
    resource_name = "blog"

    def _to_domain(self, db_blog: BlogModel) -> "Blog":
        """Преобразование модели БД в доменную сущность"""
        from cms.domains.blogs.entities import Blog

        return Blog(
            id=db_blog.id,
            title=db_blog.title,
            content=db_blog.content,
            image_url=db_blog.image_url,
            owner_id=db_blog.owner_id,
            created_at=db_blog.created_at,
            updated_at=db_blog.updated_at
        )
