"""API endpoint for budget advice from the LLM gateway."""

import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from budget_planner.ai.client import AIClient, AIServiceError
from budget_planner.dependencies import get_ai
from budget_planner.schemas.advice import AdviceRequest, AdviceResponse, AdviceError
from budget_planner.services import advice_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/advice", tags=["advice"])


@router.post(
    "",
    response_model=AdviceResponse,
    responses={
        402: {"model": AdviceError},
        429: {"model": AdviceError},
        500: {"model": AdviceError},
    },
)
async def get_advice(
    request: AdviceRequest,
    client: AIClient = Depends(get_ai)
):
    """
    Answer a chat message using the supplied budget context.
    Returns {response, agentType}, or {error} with 429/402 on gateway limits.
    """
    try:
        result = await advice_service.request_advice(
            client,
            request.message,
            request.budget_context,
            request.conversation_history,
        )
    except AIServiceError as e:
        logger.error(f"Budget advice error: {e}")
        status = e.status_code if e.status_code in (402, 429) else 500
        message = e.user_message if status != 500 else "AI service error"
        return JSONResponse(status_code=status, content={"error": message})

    return AdviceResponse(response=result.response, agent_type=result.agent_type)
