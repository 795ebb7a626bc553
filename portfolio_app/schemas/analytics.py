"""
Read-only analytics views returned by AnalyticsService.

Outer envelopes (dashboard, detailed analytics) use camelCase keys for the
admin frontend; the rows inside keep snake_case column names.
"""

from datetime import date as date_type, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from portfolio_app.schemas.link import LinkRecord


class ClickTrend(BaseModel):
    date: date_type
    clicks: int


class ProjectTypeStats(BaseModel):
    project_type: str
    count: int
    total_clicks: int


class TopLink(BaseModel):
    link_id: str
    project_name: str
    project_type: str
    click_count: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class EngagementMetrics(BaseModel):
    total_links: int
    total_clicks: int
    avg_clicks: float
    active_links: int


class ActivityItem(BaseModel):
    """
    One entry of the recent activity feed.
    
    source is the visitor IP for link clicks and the sender's email for messages.
    """
    type: Literal["link_click", "message"]
    description: str
    timestamp: datetime
    source: Optional[str] = None


class DashboardAnalytics(BaseModel):
    click_trends: List[ClickTrend]
    project_types: List[ProjectTypeStats]
    top_links: List[TopLink]
    engagement: EngagementMetrics
    recent_activity: List[ActivityItem]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DailyClicks(BaseModel):
    date: date_type
    clicks: int
    unique_visitors: int


class RefererStats(BaseModel):
    referer: str
    count: int


class DetailedLinkAnalytics(BaseModel):
    link: LinkRecord
    click_analytics: List[DailyClicks]
    referrers: List[RefererStats]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
