from typing import List, Optional

from pydantic import Field

from app.schema.base_schema import CamelModel


class ChatContext(CamelModel):
    goal_id: Optional[str] = None
    conversation_type: Optional[str] = None


class ChatRequest(CamelModel):
    message: str = Field(min_length=1)
    context: Optional[ChatContext] = None


class ChatMetadata(CamelModel):
    model: str
    tokens: int
    conversation_id: str


class ChatResponse(CamelModel):
    message: str
    suggestions: List[str]
    metadata: ChatMetadata


class InspirationOut(CamelModel):
    id: str
    type: str
    title: str
    content: str
    author: Optional[str] = None
    category: Optional[str] = None
    tags: List[str]
    is_personalized: bool
    created_at: str


class TipOut(CamelModel):
    title: Optional[str] = None
    content: str
    category: Optional[str] = None
