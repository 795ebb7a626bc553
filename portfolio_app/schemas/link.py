from pydantic import BaseModel, Field, computed_field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime
from portfolio_app.config import settings


class LinkCreate(BaseModel):
    """Body of POST /api/generate-link (camelCase keys, like the frontend sends)

    Required fields are Optional so blank and missing values both reach
    LinkService and fail with ValidationError (HTTP 400).
    """
    project_name: Optional[str] = Field(None, description="Name of the project")
    project_type: Optional[str] = Field(None, description="Free-text project category")
    original_url: Optional[str] = Field(None, description="Where the link redirects to")
    description: Optional[str] = None
    expires_in_days: Optional[int] = Field(
        None, ge=-36500, le=36500, description="Days until the link expires"
    )

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LinkCreated(BaseModel):
    link_id: str
    expires_at: Optional[datetime] = None
    success: bool = True
    message: str = "Link generated successfully"

    @computed_field(alias="generatedUrl")
    @property
    def generated_url(self) -> str:
        """Computed field - public redirect URL built from link_id"""
        return f"{settings.base_url}/api/redirect/{self.link_id}"

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LinkRecord(BaseModel):
    """Full generated_links row, serialized straight from the SQLAlchemy model"""
    id: int
    link_id: str
    project_name: str
    project_type: str
    original_url: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime
    expires_at: Optional[datetime] = None
    is_active: bool
    click_count: int

    model_config = ConfigDict(from_attributes=True)


class LinkWithClicks(LinkRecord):
    """Link row plus the click count computed from the analytics table"""
    total_clicks: int


class LinkSummary(BaseModel):
    link_id: str
    project_name: str
    project_type: str
    total_clicks: int
    created_at: datetime
    expires_at: Optional[datetime] = None
    is_active: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
