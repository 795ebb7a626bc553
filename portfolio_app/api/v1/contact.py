from fastapi import APIRouter, BackgroundTasks, Depends
from portfolio_app.notifications.models import ContactNotification
from portfolio_app.notifications.strategies import NotifierStrategy, notify_safely
from portfolio_app.schemas.message import ContactCreate, ContactSubmitted
from portfolio_app.services.contact_service import ContactService
from portfolio_app.dependencies import get_contact_service, get_notifier

router = APIRouter(tags=["contact"])


@router.post("/contact", response_model=ContactSubmitted)
async def submit_contact(
    contact_data: ContactCreate,
    background_tasks: BackgroundTasks,
    contact_service: ContactService = Depends(get_contact_service),
    notifier: NotifierStrategy = Depends(get_notifier)
):
    """
    Save a contact-form submission, then notify the site owner.
    
    The notification runs as a background task after the response is
    built; its outcome never changes the submission result.
    """
    contact = await contact_service.create_message(
        name=contact_data.name,
        email=contact_data.email,
        subject=contact_data.subject,
        message=contact_data.message,
    )
    
    background_tasks.add_task(
        notify_safely, notifier, ContactNotification.model_validate(contact)
    )
    
    return ContactSubmitted(id=contact.id)
