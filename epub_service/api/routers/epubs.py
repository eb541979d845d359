"""
EPUB status API endpoints.

Routes: GET /epubs/{epub_id}

Dependencies: epub_service.core, epub_service.models
System role: EPUB status polling HTTP API
"""

from fastapi import APIRouter, Depends

from epub_service.api.deps import get_epub_orchestrator
from epub_service.core.epub_orchestrator import EpubStatusOrchestrator
from epub_service.core.object_keys import validate_epub_id
from epub_service.models.epub import EpubStatusResponse

router = APIRouter(prefix="/epubs", tags=["epubs"])


@router.get(
    "/{epub_id}",
    response_model=EpubStatusResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
async def get_epub_status(
    epub_id: str,
    orchestrator: EpubStatusOrchestrator = Depends(get_epub_orchestrator),
) -> EpubStatusResponse:
    """
    Get EPUB generation status for frontend polling.

    The first request for an id starts generation. Clients should poll while
    status is PENDING or PROCESSING; a COMPLETED response carries a signed
    download URL valid for one hour.

    Args:
        epub_id: Work item id (law revision id)
        orchestrator: Injected EpubStatusOrchestrator

    Returns:
        EpubStatusResponse: Status descriptor with:
            - id: Requested id
            - status: PENDING, PROCESSING, COMPLETED or FAILED
            - signedUrl: Download URL (COMPLETED only)
            - error: Worker error message (FAILED only)

    Raises:
        ValidationError: Id cannot be used as an object key (400)
        StoreUnavailableError: Object store failure (503)
        RecordCorruptError: Undecodable status record (500)

    Example Response:
        {
            "id": "129AC0000000089_20230401_505AC0000000053",
            "status": "PENDING"
        }
    """
    validate_epub_id(epub_id)
    return await orchestrator.query(epub_id)
