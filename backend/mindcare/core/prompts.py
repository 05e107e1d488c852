"""
Prompt Builder - instruction text sent to the upstream completion API.
"""

from typing import List

from ..llm.base import LLMMessage

REPLY = "reply"
SUMMARY = "summary"

SUMMARY_PROMPT_TEMPLATE = """
You are a compassionate mental health assistant.
Analyze the following conversation history and summarize the user's emotional state and behavior in 3-4 sentences.
Use clear, non-technical, and supportive language.
Here is the message history:
{transcript}
"""

REPLY_PROMPT = """
Act as a compassionate mental health assistant. Given a user's message, provide:
- A thoughtful response
- A brief emotional analysis of the user's state

Respond in this JSON format:
{
  "response": "<your reply>",
  "emotional_analysis": "<your brief analysis>"
}
"""


def build_prompt(kind: str, text: str) -> str:
    """
    Build the system instruction for a completion request.

    For ``summary`` the transcript is embedded in the prompt itself; for
    ``reply`` the prompt is fixed and the user's text travels separately.
    """
    if kind == SUMMARY:
        return SUMMARY_PROMPT_TEMPLATE.format(transcript=text)
    if kind == REPLY:
        return REPLY_PROMPT
    raise ValueError(f"Unsupported completion kind: {kind}")


def build_messages(kind: str, text: str) -> List[LLMMessage]:
    """System prompt first; ``reply`` adds the user's text verbatim."""
    messages = [LLMMessage.system(build_prompt(kind, text))]
    if kind == REPLY:
        messages.append(LLMMessage.user(text))
    return messages
