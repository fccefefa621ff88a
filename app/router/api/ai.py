from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.model.users import User
from app.router.api.logics.coach_logic import chat_logic, inspiration_logic, tips_logic
from app.router.dependencies import get_current_user
from app.schema.ai_schema import ChatRequest, ChatResponse, InspirationOut, TipOut

router = APIRouter()


@router.post("/chat", response_model=ChatResponse, status_code=status.HTTP_200_OK)
def chat(request: ChatRequest,
         db: Session = Depends(get_db),
         user: User = Depends(get_current_user)):
    """Reply to the user with a keyword-matched coaching template

    Args:
        request (ChatRequest): the user's message and optional context

    Raises:
        HTTPException: 500 when the matched template needs quotes or tips that are not stored

    Returns:
        ChatResponse: reply text, follow-up suggestions and metadata
    """
    return chat_logic(db, request, user)


@router.get("/inspiration", response_model=InspirationOut, status_code=status.HTTP_200_OK)
def get_inspiration(db: Session = Depends(get_db),
                    user: User = Depends(get_current_user)):
    """Quote of the day, stable for a user for the whole day."""
    return inspiration_logic(db, user)


@router.get("/tips", response_model=List[TipOut], status_code=status.HTTP_200_OK)
def get_tips(db: Session = Depends(get_db),
             user: User = Depends(get_current_user)):
    return tips_logic(db, user)
