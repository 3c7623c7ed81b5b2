import asyncio

from fastapi import APIRouter

from core import insights
from core.config import INSIGHTS_REPLY_DELAY
from schemas.common import envelope
from schemas.insights import ChatReply, ChatRequest

router = APIRouter(prefix="/api/insights", tags=["insights"])


@router.get("/charts")
def get_chart_series():
    return envelope(data=insights.chart_series())


@router.get("/chat")
def get_chat_greeting():
    return envelope(data=insights.GREETING)


@router.post("/chat")
async def ask_insights(body: ChatRequest):
    """Keyword-matched canned reply, sent after a fixed delay."""
    if INSIGHTS_REPLY_DELAY > 0:
        await asyncio.sleep(INSIGHTS_REPLY_DELAY)
    return envelope(data=ChatReply(message=body.message, reply=insights.answer(body.message)))
