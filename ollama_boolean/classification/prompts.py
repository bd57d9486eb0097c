"""
Prompt templates for yes/no classification
"""


# System prompt constraining the model to a single {"result": <int>} object
SYSTEM_PROMPT = """You are a classification engine. Based on the user's question,
respond with a single JSON object. Use {"result": 1} for a 'yes' or
positive answer, {"result": 0} for a 'no' or negative answer, and
{"result": 2} if the answer is unknown or subjective.
Do not provide any other text or explanation."""


def construct_messages(prompt: str) -> list[dict[str, str]]:
    """
    Build the chat messages for one classification request.

    Args:
        prompt: The user's question, passed through verbatim

    Returns:
        [system, user] message dicts
    """
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]
