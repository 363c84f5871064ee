"""
Greeting and info page.

``/`` answers with a plain text greeting and ``/info`` with a small
HTML fragment reporting how many people the phonebook holds and the
current server time.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from phonebook_api.app.services.person_service import PersonService, get_person_service

router = APIRouter()

# Rendered like a JavaScript ``Date`` string, e.g.
# ``Mon Oct 19 2026 09:30:00 GMT+0000 (UTC)``.
TIMESTAMP_FORMAT = "%a %b %d %Y %H:%M:%S GMT%z (%Z)"


@router.get("/", response_class=PlainTextResponse)
async def greeting() -> str:
    return "Hello World!"


@router.get("/info", response_class=HTMLResponse)
async def get_info(service: PersonService = Depends(get_person_service)) -> str:
    """Return the entry count and the time of the request as HTML."""
    summary = await service.summary()
    timestamp = summary.generated_at.strftime(TIMESTAMP_FORMAT)
    return (
        "<div>"
        f"<p>Phonebook has info for {summary.count} people</p>"
        f"<p>{timestamp}</p>"
        "</div>"
    )
