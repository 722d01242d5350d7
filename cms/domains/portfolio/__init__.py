from cms.domains.portfolio.entities import PortfolioProject
from cms.domains.portfolio.schemas import PortfolioPayload, PortfolioResponse
from cms.domains.portfolio.services import PORTFOLIO_LABELS, PortfolioService

__all__ = [
    "PortfolioProject", "PortfolioPayload", "PortfolioResponse",
    "PORTFOLIO_LABELS", "PortfolioService"
]
