from html import escape

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from portfolio_app.schemas.link import LinkCreate, LinkCreated
from portfolio_app.services.link_service import LinkService
from portfolio_app.dependencies import get_link_service
from portfolio_app.config import settings

router = APIRouter(tags=["links"])


NOT_FOUND_PAGE = """
<html>
    <head><title>Link Not Found</title></head>
    <body style="font-family: Arial, sans-serif; text-align: center; padding: 50px;">
        <h1>Link Not Found or Expired</h1>
        <p>This link may have expired or doesn't exist.</p>
        <a href="/portfolio.html">Return to Portfolio</a>
    </body>
</html>
"""


def client_ip(request: Request):
    """
    Socket peer address, or the first X-Forwarded-For hop when
    settings.trust_forwarded_for is on (only behind a trusted proxy).
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded and settings.trust_forwarded_for:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


def render_project_page(link) -> str:
    """Fallback page for links without an original_url"""
    return f"""
<html>
    <head><title>{escape(link.project_name)}</title></head>
    <body style="font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px;">
        <div class="project-header">
            <h1>{escape(link.project_name)}</h1>
            <p>Project Type: {escape(link.project_type)}</p>
        </div>
        <div class="project-content">
            <p>{escape(link.description or 'No description available.')}</p>
            <p><strong>Generated:</strong> {link.created_at:%Y-%m-%d}</p>
            <p><strong>Clicks:</strong> {link.click_count}</p>
        </div>
        <a href="/portfolio.html">&larr; Back to Portfolio</a>
    </body>
</html>
"""


@router.post("/generate-link", response_model=LinkCreated)
async def generate_link(
    link_data: LinkCreate,
    link_service: LinkService = Depends(get_link_service)
):
    """Create a project link; only the identifier, URL and expiry are returned"""
    link = await link_service.create_link(
        project_name=link_data.project_name,
        project_type=link_data.project_type,
        original_url=link_data.original_url,
        description=link_data.description,
        expires_in_days=link_data.expires_in_days,
    )
    return LinkCreated(link_id=link.link_id, expires_at=link.expires_at)


@router.get("/redirect/{link_id}")
async def redirect_link(
    link_id: str,
    request: Request,
    link_service: LinkService = Depends(get_link_service)
):
    """
    Resolve a generated link.
    
    Flow:
    1. Resolve the link and record the click (one transaction)
    2. Redirect to original_url, or render the project page
    
    Missing, inactive and expired links all get the same 404 page.
    """
    link = await link_service.resolve_link(
        link_id,
        ip_address=client_ip(request),
        user_agent=request.headers.get("user-agent"),
        referer=request.headers.get("referer") or None,
    )
    
    if not link:
        return HTMLResponse(NOT_FOUND_PAGE, status_code=status.HTTP_404_NOT_FOUND)
    
    if link.original_url:
        return RedirectResponse(url=link.original_url, status_code=status.HTTP_302_FOUND)
    
    return HTMLResponse(render_project_page(link))
