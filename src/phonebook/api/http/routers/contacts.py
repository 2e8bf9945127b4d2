"""Contacts API router with CRUD and search operations."""

from fastapi import APIRouter, Depends, Query, Request, Response, status

from src.phonebook.api.http.deps import get_contact_service
from src.phonebook.api.http.schemas.contact import ContactResponse, ErrorResponse
from src.phonebook.core.models.contact import ContactCreate, ContactUpdate
from src.phonebook.core.services import ContactService
from src.phonebook.entities.contact import Contact

router = APIRouter(
    prefix="/contacts",
    tags=["contacts"],
    responses={500: {"model": ErrorResponse}},
)

_NOT_FOUND = {404: {"model": ErrorResponse}}
_BAD_REQUEST = {400: {"model": ErrorResponse}}


def _to_response(contact: Contact) -> ContactResponse:
    return ContactResponse.model_validate(contact, from_attributes=True)


@router.get("", response_model=list[ContactResponse])
def list_contacts(
    service: ContactService = Depends(get_contact_service),
) -> list[ContactResponse]:
    """List all contacts."""
    return [_to_response(contact) for contact in service.list_contacts()]


@router.get("/search", response_model=list[ContactResponse])
def search_contacts(
    search_term: str | None = Query(default=None, alias="searchTerm"),
    service: ContactService = Depends(get_contact_service),
) -> list[ContactResponse]:
    """Search contacts by name or phone number.

    An empty or missing ``searchTerm`` returns every contact.
    """
    return [_to_response(contact) for contact in service.search_contacts(search_term)]


@router.get("/{contact_id}", response_model=ContactResponse, responses=_NOT_FOUND)
def get_contact(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    """Get a contact by ID."""
    return _to_response(service.get_contact(contact_id))


@router.post(
    "",
    response_model=ContactResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
)
def create_contact(
    payload: ContactCreate,
    request: Request,
    response: Response,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    """Create a new contact; the phone number must not be in use."""
    created = service.create_contact(payload)
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{created.id}"
    return _to_response(created)


@router.put(
    "/{contact_id}",
    response_model=ContactResponse,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def update_contact(
    contact_id: str,
    payload: ContactUpdate,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    """Replace a contact's name, phone number and email."""
    return _to_response(service.update_contact(contact_id, payload))


@router.delete(
    "/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
)
def delete_contact(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
) -> Response:
    """Delete a contact."""
    service.delete_contact(contact_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
