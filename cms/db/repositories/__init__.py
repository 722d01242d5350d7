from cms.db.repositories.base import SqlAlchemyRepository
from cms.db.repositories.user_repository import UserRepository
from cms.db.repositories.blog_repository import BlogRepository
from cms.db.repositories.job_repository import JobRepository
from cms.db.repositories.portfolio_repository import PortfolioRepository
from cms.db.repositories.contact_repository import ContactRepository

__all__ = [
    "SqlAlchemyRepository",
    "UserRepository",
    "BlogRepository",
    "JobRepository",
    "PortfolioRepository",
    "ContactRepository"
]
