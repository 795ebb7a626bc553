from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from portfolio_app.schemas.analytics import DashboardAnalytics, DetailedLinkAnalytics
from portfolio_app.schemas.link import LinkSummary, LinkWithClicks
from portfolio_app.schemas.message import ContactMessageResponse
from portfolio_app.services.analytics_service import AnalyticsService
from portfolio_app.dependencies import get_analytics_service

router = APIRouter(tags=["analytics"])


@router.get("/analytics/detailed/{link_id}", response_model=DetailedLinkAnalytics)
async def get_detailed_analytics(
    link_id: str,
    analytics: AnalyticsService = Depends(get_analytics_service)
):
    """Per-day clicks, unique visitors and top referers for one link"""
    details = await analytics.detailed_link_analytics(link_id)
    if not details:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Link not found"
        )
    return details


@router.get("/analytics/{link_id}", response_model=LinkSummary)
async def get_link_analytics(
    link_id: str,
    analytics: AnalyticsService = Depends(get_analytics_service)
):
    summary = await analytics.link_summary(link_id)
    if not summary:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Link not found"
        )
    return summary


@router.get("/admin/links", response_model=List[LinkWithClicks])
async def list_links(analytics: AnalyticsService = Depends(get_analytics_service)):
    return await analytics.all_links()


@router.get("/admin/messages", response_model=List[ContactMessageResponse])
async def list_messages(analytics: AnalyticsService = Depends(get_analytics_service)):
    return await analytics.all_messages()


@router.get("/dashboard/analytics", response_model=DashboardAnalytics)
async def get_dashboard(analytics: AnalyticsService = Depends(get_analytics_service)):
    """Click trends, project types, top links, engagement and recent activity"""
    return await analytics.dashboard()
