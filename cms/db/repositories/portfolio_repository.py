from typing import TYPE_CHECKING

from cms.db.models.portfolio import PortfolioProject as PortfolioProjectModel
from cms.db.repositories.base import SqlAlchemyRepository

if TYPE_CHECKING:
    from cms.domains.portfolio.entities import PortfolioProject


class PortfolioRepository(SqlAlchemyRepository):
    """Репозиторий для работы с проектами портфолио"""

    model = PortfolioProjectModel
    resource_name = "project"

    def _to_domain(self, db_project: PortfolioProjectModel) -> "PortfolioProject":
        from cms.domains.portfolio.entities import PortfolioProject

        return PortfolioProject(
            id=db_project.id,
            title=db_project.title,
            description=db_project.description,
            image=db_project.image,
            owner_id=db_project.owner_id,
            created_at=db_project.created_at,
            updated_at=db_project.updated_at
        )
