"""Text processing utilities."""


def strip_code_fence(content: str) -> str:
    """Remove a Markdown code fence wrapped around a model answer.

    Strips backticks from both ends and an optional leading ``json``
    language tag, so "```json\\n[...]\\n```" becomes "[...]".

    Args:
        content: Raw message content

    Returns:
        The content with the fence removed
    """
    answer = content.strip().strip("`")
    if answer.startswith("json"):
        answer = answer[len("json") :]
    return answer.strip()
