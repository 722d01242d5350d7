from cms.api.http.resources import build_resource_router
from cms.domains.portfolio import PORTFOLIO_LABELS, PortfolioResponse, PortfolioService

router = build_resource_router(
    prefix="/portfolio",
    labels=PORTFOLIO_LABELS,
    service_factory=PortfolioService,
    response_schema=PortfolioResponse,
    tags=["portfolio"],
)
