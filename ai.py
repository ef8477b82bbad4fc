"""
Hosted text generation for the chat companion.
"""

import json
import logging
from typing import Optional, Sequence

import config
from models import JournalEntry, MoodDefinition

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = """You are STAY, an AI companion designed to support teens with mental health challenges and prevent suicide.
Your responses should be:
1. Empathetic and supportive
2. Non-judgmental and understanding
3. Focused on active listening and validation
4. Encouraging of professional help when needed
5. Age-appropriate and relatable to Gen Z
6. Calming and reassuring
7. Based on evidence-based psychological and neuroscience principles to maximize helpfulness and support

IMPORTANT: Please keep your responses brief, clear, and to the point, while still being meaningful and supportive. Do not use any Markdown or formatting (no asterisks, no bold, no lists). Give only 2 or 3 key suggestions or ideas, not a long list. Avoid unnecessary detail or repetition.

Never introduce yourself, never say you are STAY or an AI, never ask for scenarios, and never explain your own role. Always answer the user's question directly and concisely.

If the user asks for examples or elaboration, provide 1 or 2 short, real-life examples directly related to their question, without any introduction or meta-commentary.

Remember to:
- Never give medical advice
- Always encourage seeking professional help for serious concerns
- Maintain appropriate boundaries
- Use a warm, conversational tone
- Validate feelings and experiences
- Provide resources when relevant"""

INSIGHTS_SYSTEM_PROMPT = """You are a helpful journal analytics assistant.
Give a concise, insightful, and encouraging answer based only on the data provided."""


class AIUnavailableError(RuntimeError):
    def __init__(self, message: str = "AI unavailable"):
        super().__init__(message)


def generate(prompt: str, system_prompt: str = SYSTEM_PROMPT, max_tokens: Optional[int] = None) -> str:
    """Generate a reply with the Groq API. Single attempt, no retries."""
    if not config.GROQ_API_KEY:
        raise AIUnavailableError()

    try:
        from groq import Groq
        client = Groq(api_key=config.GROQ_API_KEY, timeout=config.AI_TIMEOUT, max_retries=0)

        response = client.chat.completions.create(
            model=config.AI_MODEL,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            max_tokens=max_tokens or config.AI_MAX_TOKENS,
            temperature=0.7,
            top_p=0.95,
        )
        text = (response.choices[0].message.content or "").strip()

    except Exception as e:
        logger.error(f"AI generation error: {e}")
        raise AIUnavailableError() from e

    if not text:
        raise AIUnavailableError()
    return text


def insights_prompt(
    entries: Sequence[JournalEntry],
    moods: Sequence[MoodDefinition],
    tags: Sequence[str],
    question: Optional[str],
) -> str:
    """User prompt asking the model to analyse the journal snapshot."""
    question = question or "Give me a summary of my mood and category trends."
    return f"""The user has the following journal entries:
{json.dumps([e.to_dict() for e in entries], indent=2, ensure_ascii=False)}
Moods: {json.dumps([m.to_dict() for m in moods], indent=2, ensure_ascii=False)}
Tags: {json.dumps(list(tags), indent=2, ensure_ascii=False)}
User's question: "{question}"
"""
