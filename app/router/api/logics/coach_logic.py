import random
import time
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Callable, List, Optional, Sequence, Tuple

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.exceptions import ContentUnavailableError
from app.log import get_logger
from app.model.goals import GoalCategory
from app.model.motivational_content import ContentType, MotivationalContent
from app.model.users import User
from app.repository import GoalRepository, MotivationalContentRepository
from app.schema.ai_schema import ChatMetadata, ChatRequest, ChatResponse, InspirationOut, TipOut

log = get_logger(__name__)

COACH_MODEL = "buildu-template-v1"
TIP_CATEGORIES = (GoalCategory.employment, GoalCategory.skills, GoalCategory.wellbeing)
DEFAULT_TIP_CATEGORY = "goal-setting"


#####################
### template chat ###
#####################

@dataclass(frozen=True)
class CoachContent:
    quotes: Sequence[MotivationalContent]
    tips: Sequence[MotivationalContent]
    rng: random.Random


@dataclass(frozen=True)
class CoachRule:
    name: str
    matches: Callable[[str], bool]
    respond: Callable[[CoachContent], str]
    suggestions: Tuple[str, ...]
    needs: Optional[ContentType] = None


def mentions(*keywords: str) -> Callable[[str], bool]:
    def predicate(message: str) -> bool:
        return any(k in message for k in keywords)
    return predicate


def _goal_tip(content: CoachContent) -> str:
    tip = content.rng.choice(content.tips)
    return (
        "That's a great question about goal setting! Here's a helpful tip: "
        f"**{tip.title}**\n\n{tip.content}\n\n"
        "Remember, every journey begins with a single step. "
        "What specific step could you take today to move closer to your goal?"
    )


def _inspiring_quote(content: CoachContent) -> str:
    quote = content.rng.choice(content.quotes)
    return (
        f"Here's some inspiration for you:\n\n*\"{quote.content}\"*\n— {quote.author or 'Unknown'}\n\n"
        "You have the strength and capability to achieve amazing things. "
        "Every challenge you face is an opportunity to grow stronger. Keep believing in yourself!"
    )


def _unstuck(content: CoachContent) -> str:
    return (
        "I understand that things can feel challenging sometimes. Remember, feeling stuck is "
        "temporary - it's often a sign that you're on the verge of a breakthrough! "
        "Here are some strategies that can help:\n\n"
        "• Take a step back and reassess your approach\n"
        "• Break the problem into smaller, manageable pieces\n"
        "• Ask for help from friends, family, or mentors\n"
        "• Try a different strategy or angle\n"
        "• Celebrate the progress you've already made\n\n"
        "What specific challenge are you facing right now?"
    )


def _career(content: CoachContent) -> str:
    return (
        "Career development is such an important goal! Here are some practical tips:\n\n"
        "**For CV/Resume:**\n"
        "• Tailor it to each job application\n"
        "• Use action verbs and quantify achievements\n"
        "• Keep it concise (1-2 pages)\n"
        "• Include relevant skills from recent training\n\n"
        "**For Interviews:**\n"
        "• Research the company beforehand\n"
        "• Prepare STAR method examples\n"
        "• Practice common questions out loud\n"
        "• Prepare thoughtful questions to ask them\n\n"
        "What aspect of your career development would you like to focus on first?"
    )


def _general(content: CoachContent) -> str:
    return (
        "Thank you for sharing that with me! I'm here to support you on your journey. "
        "Whether you're working on career goals, personal development, or overcoming challenges, "
        "remember that every step forward is progress worth celebrating.\n\n"
        "What would you like to focus on today?"
    )


# first match wins, the last rule catches everything
COACH_RULES: Tuple[CoachRule, ...] = (
    CoachRule(
        name="goal_setting",
        matches=mentions("goal", "achieve"),
        respond=_goal_tip,
        suggestions=(
            "Help me break down my goal into smaller steps",
            "What should I do when I feel stuck?",
            "How do I stay motivated when progress is slow?",
        ),
        needs=ContentType.tip,
    ),
    CoachRule(
        name="motivation",
        matches=mentions("motivation", "inspire"),
        respond=_inspiring_quote,
        suggestions=(
            "Tell me more about overcoming challenges",
            "How do I build confidence?",
            "Share another inspiring quote",
        ),
        needs=ContentType.quote,
    ),
    CoachRule(
        name="problem_solving",
        matches=mentions("stuck", "difficult", "hard"),
        respond=_unstuck,
        suggestions=(
            "Help me with my job search strategy",
            "I'm struggling with time management",
            "How do I handle rejection?",
        ),
    ),
    CoachRule(
        name="career",
        matches=mentions("cv", "resume", "interview"),
        respond=_career,
        suggestions=(
            "Help me update my CV with new skills",
            "How do I prepare for my first interview in years?",
            "What questions should I ask in an interview?",
        ),
    ),
    CoachRule(
        name="general",
        matches=lambda message: True,
        respond=_general,
        suggestions=(
            "Help me set a new goal",
            "I need some motivation",
            "Share tips for staying on track",
        ),
    ),
)


def match_rule(message: str, rules: Sequence[CoachRule] = COACH_RULES) -> CoachRule:
    lowered = message.lower()
    for rule in rules:
        if rule.matches(lowered):
            return rule
    raise LookupError("no coach rule matched")  # unreachable with the catch-all rule


def reply(message: str, content: CoachContent, rules: Sequence[CoachRule] = COACH_RULES) -> Tuple[str, List[str]]:
    """
    Pick the first rule whose keywords appear in the message and render it.

    Raises:
        ContentUnavailableError: If the rule needs stored quotes or tips and there are none.
    """
    rule = match_rule(message, rules)
    if rule.needs == ContentType.tip and not content.tips:
        raise ContentUnavailableError("no goal-setting tips stored")
    if rule.needs == ContentType.quote and not content.quotes:
        raise ContentUnavailableError("no quotes stored")
    return rule.respond(content), list(rule.suggestions)


def chat_logic(db: Session, request: ChatRequest, user: User, rng: Optional[random.Random] = None) -> ChatResponse:
    repo = MotivationalContentRepository(db)
    content = CoachContent(
        quotes=repo.list_by_type(ContentType.quote),
        tips=repo.list_by_type(ContentType.tip),
        rng=rng or random.Random(),
    )
    try:
        message, suggestions = reply(request.message, content)
    except ContentUnavailableError as e:
        log.error("Coach reply failed for user %s: %s", user.id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not fetch motivational content",
        ) from e

    return ChatResponse(
        message=message,
        suggestions=suggestions,
        metadata=ChatMetadata(
            model=COACH_MODEL,
            tokens=len(message),
            conversation_id=f"conv_{int(time.time() * 1000)}_{user.id}",
        ),
    )


###################
### inspiration ###
###################

def daily_index(seed: str, size: int) -> int:
    """Stable index in [0, size) for a seed string (31-multiplier string hash, 32-bit)."""
    h = 0
    for ch in seed:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h) % size


def inspiration_logic(db: Session, user: User, today: Optional[date] = None) -> InspirationOut:
    quotes = MotivationalContentRepository(db).list_by_type(ContentType.quote)
    if not quotes:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not fetch motivational content",
        )

    today = today or datetime.now(timezone.utc).date()
    quote = quotes[daily_index(today.isoformat() + user.id, len(quotes))]
    return InspirationOut(
        id=f"daily_{today.isoformat()}",
        type=ContentType.quote.value,
        title="Today's Inspiration",
        content=quote.content,
        author=quote.author,
        category=quote.category,
        tags=[t for t in ("daily", "motivation", quote.category) if t],
        is_personalized=False,
        created_at=datetime.now(timezone.utc).isoformat(),
    )


############
### tips ###
############

def tips_logic(db: Session, user: User) -> List[TipOut]:
    """Tips matching the categories of the user's active goals, generic ones otherwise."""
    categories = set(GoalRepository(db).active_categories_for_user(user.id))
    tips = MotivationalContentRepository(db).list_by_type(ContentType.tip)

    selected = []
    for category in TIP_CATEGORIES:
        if category in categories:
            selected.extend(t for t in tips if t.category == category.value)
    if not selected:
        selected = [t for t in tips if t.category == DEFAULT_TIP_CATEGORY]
    return [TipOut.model_validate(t) for t in selected]
