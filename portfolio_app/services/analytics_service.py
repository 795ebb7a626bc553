"""
Analytics aggregator.

Every view is a plain read computed fresh per request. The dashboard is
composed from small independent query methods so each one can be tested
and reused on its own.
"""

from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy import case, func
from sqlalchemy.orm import Session
from portfolio_app.config import settings
from portfolio_app.database.connection import utcnow
from portfolio_app.exceptions import storage_guard
from portfolio_app.models import ClickEvent, ContactMessage, GeneratedLink
from portfolio_app.schemas.analytics import (
    ActivityItem,
    ClickTrend,
    DailyClicks,
    DashboardAnalytics,
    DetailedLinkAnalytics,
    EngagementMetrics,
    ProjectTypeStats,
    RefererStats,
    TopLink,
)
from portfolio_app.schemas.link import LinkRecord, LinkSummary, LinkWithClicks
from portfolio_app.schemas.message import ContactMessageResponse


def _start_of_day(days_ago: int) -> datetime:
    """Midnight (UTC) of the day `days_ago` days before today"""
    today = utcnow().replace(hour=0, minute=0, second=0, microsecond=0)
    return today - timedelta(days=days_ago)


class AnalyticsService:
    """Read-only queries over links, click events and contact messages"""

    def __init__(self, db: Session):
        self.db = db

    def _links_with_live_clicks(self):
        """Links joined with their analytics row count (not the counter column)"""
        total_clicks = func.count(ClickEvent.id).label("total_clicks")
        return (
            self.db.query(GeneratedLink, total_clicks)
            .outerjoin(ClickEvent, ClickEvent.link_id == GeneratedLink.link_id)
            .group_by(GeneratedLink.id)
        )

    async def link_summary(self, link_id: str) -> Optional[LinkSummary]:
        """Link metadata with the click total counted from the analytics table"""
        with storage_guard(self.db, f"summarizing link {link_id}"):
            row = self._links_with_live_clicks().filter(
                GeneratedLink.link_id == link_id
            ).first()

        if not row:
            return None

        link, total_clicks = row
        return LinkSummary(
            link_id=link.link_id,
            project_name=link.project_name,
            project_type=link.project_type,
            total_clicks=total_clicks,
            created_at=link.created_at,
            expires_at=link.expires_at,
            is_active=link.is_active,
        )

    async def all_links(self) -> List[LinkWithClicks]:
        """Every link with its live click count, newest first"""
        with storage_guard(self.db, "listing links"):
            rows = self._links_with_live_clicks().order_by(
                GeneratedLink.created_at.desc(),
                GeneratedLink.id.desc()
            ).all()

        return [
            LinkWithClicks(
                **LinkRecord.model_validate(link).model_dump(),
                total_clicks=total_clicks
            )
            for link, total_clicks in rows
        ]

    async def all_messages(self) -> List[ContactMessageResponse]:
        """Every contact message, newest first"""
        with storage_guard(self.db, "listing messages"):
            messages = self.db.query(ContactMessage).order_by(
                ContactMessage.created_at.desc(),
                ContactMessage.id.desc()
            ).all()

        return [ContactMessageResponse.model_validate(m) for m in messages]

    # ---- Dashboard building blocks ----

    def click_trends(self, days: int) -> List[ClickTrend]:
        """Clicks per day over the trailing window, oldest day first"""
        day = func.date(ClickEvent.clicked_at)
        rows = (
            self.db.query(day.label("date"), func.count(ClickEvent.id).label("clicks"))
            .filter(ClickEvent.clicked_at >= _start_of_day(days))
            .group_by(day)
            .order_by(day)
            .all()
        )
        return [ClickTrend(date=row.date, clicks=row.clicks) for row in rows]

    def project_types(self) -> List[ProjectTypeStats]:
        """Link count and click total per project type, most clicked first"""
        total_clicks = func.coalesce(func.sum(GeneratedLink.click_count), 0).label("total_clicks")
        rows = (
            self.db.query(
                GeneratedLink.project_type,
                func.count(GeneratedLink.id).label("count"),
                total_clicks,
            )
            .group_by(GeneratedLink.project_type)
            .order_by(total_clicks.desc(), GeneratedLink.project_type)
            .all()
        )
        return [
            ProjectTypeStats(project_type=project_type, count=count, total_clicks=clicks)
            for project_type, count, clicks in rows
        ]

    def top_links(self, limit: int) -> List[TopLink]:
        """Active links with the highest click_count"""
        links = (
            self.db.query(GeneratedLink)
            .filter(GeneratedLink.is_active == True)
            .order_by(GeneratedLink.click_count.desc(), GeneratedLink.created_at.desc())
            .limit(limit)
            .all()
        )
        return [TopLink.model_validate(link) for link in links]

    def engagement(self) -> EngagementMetrics:
        """Totals and averages across all links"""
        row = self.db.query(
            func.count(GeneratedLink.id).label("total_links"),
            func.coalesce(func.sum(GeneratedLink.click_count), 0).label("total_clicks"),
            func.coalesce(func.avg(GeneratedLink.click_count), 0).label("avg_clicks"),
            func.count(case((GeneratedLink.is_active == True, 1))).label("active_links"),
        ).one()
        return EngagementMetrics(
            total_links=row.total_links,
            total_clicks=row.total_clicks,
            avg_clicks=float(row.avg_clicks),
            active_links=row.active_links,
        )

    def recent_activity(self, days: int, limit: int) -> List[ActivityItem]:
        """
        Link clicks and contact messages from the trailing window, newest first.

        Each source is queried with its own limit; the merged feed is then
        cut down to `limit` entries.
        """
        since = _start_of_day(days)

        clicks = (
            self.db.query(
                ClickEvent.clicked_at,
                ClickEvent.ip_address,
                GeneratedLink.project_name,
            )
            .join(GeneratedLink, GeneratedLink.link_id == ClickEvent.link_id)
            .filter(ClickEvent.clicked_at >= since)
            .order_by(ClickEvent.clicked_at.desc())
            .limit(limit)
            .all()
        )
        messages = (
            self.db.query(ContactMessage)
            .filter(ContactMessage.created_at >= since)
            .order_by(ContactMessage.created_at.desc())
            .limit(limit)
            .all()
        )

        feed = [
            ActivityItem(
                type="link_click",
                description=click.project_name,
                timestamp=click.clicked_at,
                source=click.ip_address,
            )
            for click in clicks
        ]
        feed.extend(
            ActivityItem(
                type="message",
                description=f"New message from {message.name}",
                timestamp=message.created_at,
                source=message.email,
            )
            for message in messages
        )
        feed.sort(key=lambda item: item.timestamp, reverse=True)
        return feed[:limit]

    async def dashboard(self) -> DashboardAnalytics:
        """Composite dashboard view"""
        with storage_guard(self.db, "building dashboard"):
            return DashboardAnalytics(
                click_trends=self.click_trends(settings.click_trend_days),
                project_types=self.project_types(),
                top_links=self.top_links(settings.top_links_limit),
                engagement=self.engagement(),
                recent_activity=self.recent_activity(
                    settings.recent_activity_days,
                    settings.recent_activity_limit
                ),
            )

    # ---- Per-link details ----

    def daily_clicks(self, link_id: str, limit: int) -> List[DailyClicks]:
        """Clicks and distinct visitor IPs per day, most recent day first"""
        day = func.date(ClickEvent.clicked_at)
        rows = (
            self.db.query(
                day.label("date"),
                func.count(ClickEvent.id).label("clicks"),
                func.count(func.distinct(ClickEvent.ip_address)).label("unique_visitors"),
            )
            .filter(ClickEvent.link_id == link_id)
            .group_by(day)
            .order_by(day.desc())
            .limit(limit)
            .all()
        )
        return [
            DailyClicks(date=row.date, clicks=row.clicks, unique_visitors=row.unique_visitors)
            for row in rows
        ]

    def top_referers(self, link_id: str, limit: int) -> List[RefererStats]:
        """Most frequent referers; direct traffic (NULL referer) is left out"""
        count = func.count(ClickEvent.id).label("count")
        rows = (
            self.db.query(ClickEvent.referer, count)
            .filter(ClickEvent.link_id == link_id, ClickEvent.referer.isnot(None))
            .group_by(ClickEvent.referer)
            .order_by(count.desc(), ClickEvent.referer)
            .limit(limit)
            .all()
        )
        return [RefererStats(referer=referer, count=hits) for referer, hits in rows]

    async def detailed_link_analytics(self, link_id: str) -> Optional[DetailedLinkAnalytics]:
        """Link row, per-day clicks/unique visitors and top referers"""
        with storage_guard(self.db, f"loading detailed analytics for {link_id}"):
            link = self.db.query(GeneratedLink).filter(
                GeneratedLink.link_id == link_id
            ).first()
            if not link:
                return None

            return DetailedLinkAnalytics(
                link=LinkRecord.model_validate(link),
                click_analytics=self.daily_clicks(link_id, settings.detailed_days_limit),
                referrers=self.top_referers(link_id, settings.top_referers_limit),
            )
