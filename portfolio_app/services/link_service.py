from datetime import timedelta
from typing import Optional

from sqlalchemy import or_, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from portfolio_app.database.connection import utcnow
from portfolio_app.exceptions import ValidationError, require_fields, storage_guard
from portfolio_app.models.link import GeneratedLink
from portfolio_app.services.click_recorder import ClickRecorder
from portfolio_app.services.link_id_factory import LinkIdFactory
from portfolio_app.services.link_id_strategies import LinkIdStrategy


class LinkService:
    """
    Link registry: creates and resolves generated project links.

    Dependencies are injected so tests can pass their own session,
    recorder or identifier strategy.
    """

    def __init__(
        self,
        db: Session,
        recorder: Optional[ClickRecorder] = None,
        link_id_strategy: Optional[LinkIdStrategy] = None
    ):
        """
        Initialize link service with dependencies.

        Args:
            db: Database session
            recorder: Click recorder sharing the same session (default: new one)
            link_id_strategy: Identifier strategy (default: from settings)
        """
        self.db = db
        self.recorder = recorder or ClickRecorder(db)
        self.link_id_strategy = link_id_strategy or LinkIdFactory.create_strategy()

    async def create_link(
        self,
        project_name: Optional[str],
        project_type: Optional[str],
        original_url: Optional[str] = None,
        description: Optional[str] = None,
        expires_in_days: Optional[int] = None
    ) -> GeneratedLink:
        """
        Create a new generated link.

        expires_in_days of None or 0 means the link never expires.
        A negative value creates a link that is already expired.

        Raises:
            ValidationError: project_name or project_type is blank,
                or expires_in_days is too large to represent as a date
            StorageError: the insert failed
        """
        require_fields(project_name=project_name, project_type=project_type)

        expires_at = None
        if expires_in_days:
            try:
                expires_at = utcnow() + timedelta(days=expires_in_days)
            except OverflowError as e:
                raise ValidationError("expires_in_days out of range") from e

        with storage_guard(self.db, "creating link"):
            link = GeneratedLink(
                link_id=self.link_id_strategy.generate(self.db),
                project_name=project_name.strip(),
                project_type=project_type.strip(),
                original_url=original_url or None,
                description=description or None,
                expires_at=expires_at,
                is_active=True,
                click_count=0,
            )
            self.db.add(link)
            self.db.commit()
            self.db.refresh(link)

        return link

    async def get_link(self, link_id: str) -> Optional[GeneratedLink]:
        """Get link by identifier regardless of its active/expiry state"""
        with storage_guard(self.db, f"loading link {link_id}"):
            return self.db.query(GeneratedLink).filter(
                GeneratedLink.link_id == link_id
            ).first()

    async def resolve_link(
        self,
        link_id: str,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
        referer: Optional[str] = None
    ) -> Optional[GeneratedLink]:
        """
        Resolve a link for a visitor and count the click.

        Flow:
        1. Look up an active, unexpired link (None otherwise - missing,
           inactive and expired links all look the same to the caller)
        2. Stage the click event and the click_count + 1 update
        3. Commit both in one transaction

        If step 2 or 3 fails the transaction is rolled back and logged,
        and the visitor still gets the link.

        Returns:
            The link with its post-increment click_count, or None
        """
        with storage_guard(self.db, f"resolving link {link_id}"):
            link = self.db.query(GeneratedLink).filter(
                GeneratedLink.link_id == link_id,
                GeneratedLink.is_active == True,
                or_(
                    GeneratedLink.expires_at.is_(None),
                    GeneratedLink.expires_at > utcnow()
                )
            ).first()

        if not link:
            return None

        try:
            self.recorder.record(link_id, ip_address, user_agent, referer)
            # SQL-side increment so concurrent resolutions never lose a click
            self.db.execute(
                update(GeneratedLink)
                .where(GeneratedLink.link_id == link_id)
                .values(click_count=GeneratedLink.click_count + 1)
            )
            self.db.commit()
        except (SQLAlchemyError, ValidationError) as e:
            self.db.rollback()
            print(f"❌ Failed to record click for {link_id}: {e}")

        with storage_guard(self.db, f"reloading link {link_id}"):
            self.db.refresh(link)

        return link
