"""
Interactive yes/no prompt.
"""

import logging
from typing import Callable

logger = logging.getLogger(__name__)

YES_ANSWER = "yes"


def choose_yes_or_no(prompt: str, input_func: Callable[[str], str] = input) -> bool:
    """Ask the user to choose yes or no with a given prompt.

    Any non-empty prefix of "yes" (case-insensitive) counts as yes; anything
    else, including end of input, counts as no.

    Args:
        prompt: The question to ask
        input_func: Function reading one line of input

    Returns:
        True for yes, False for no
    """
    try:
        reply = input_func(f"{prompt} [Y/N] > ")
    except EOFError:
        logger.debug("No input available, treating as 'no'")
        return False

    reply = reply.strip().lower()
    return reply != "" and YES_ANSWER.startswith(reply)
