"""
Completion API endpoint - a single message or transcript in, a normalized
reply or summary out.
"""

from fastapi import APIRouter, Depends

from ..core.gateway import CompletionGateway
from ..models import CompletionRequest, ErrorResponse
from .dependencies import get_completion_gateway

router = APIRouter(prefix="/api", tags=["completion"])


@router.post(
    "/completion",
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def create_completion(
    request: CompletionRequest,
    gateway: CompletionGateway = Depends(get_completion_gateway),
):
    """
    Ask the upstream model for a reply or a summary.

    Args:
        request: ``message`` plus ``type`` ("reply" by default, or "summary")

    Returns:
        ``{response, emotional_analysis}`` for replies, ``{summary}`` for summaries
    """
    result = await gateway.complete(request.type, request.message)
    return result.to_dict()
