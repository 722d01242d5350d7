from cms.db.models.user import User
from cms.db.models.blog import Blog
from cms.db.models.job import Job
from cms.db.models.portfolio import PortfolioProject
from cms.db.models.contact import ContactMessage

__all__ = [
    "User",
    "Blog",
    "Job",
    "PortfolioProject",
    "ContactMessage"
]
