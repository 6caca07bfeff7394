#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Interactive yes/no prompts."""

from __future__ import annotations

from pathlib import Path

from provide.foundation import logger
from provide.foundation.console import pin, pout

from vpm.config.defaults import CONTINUE_QUESTION, PROMPT_SUFFIX
from vpm.exceptions import InstallationCancelled
from vpm.fileops import cleanup


def interpret_answer(answer: str) -> bool | None:
    """Map an answer to True (yes/yay), False (no/nay) or None if unrecognized."""
    normalized = answer.strip().lower()
    if normalized.startswith("y"):
        return True
    if normalized.startswith("n"):
        return False
    return None


def prompt_yes_no(question: str, note: str = "") -> bool:
    """
    Ask a yes/no question on the console until a recognized answer is given.

    Args:
        question: The question; " (Yay or Nay)" is appended
        note: Optional extra line shown under the question

    Returns:
        True for yes, False for no
    """
    pout(f"{question}{PROMPT_SUFFIX}")
    if note:
        pout(note)

    while True:
        answer = pin("Answer", default="", show_default=False)
        decision = interpret_answer(str(answer))
        if decision is not None:
            logger.debug("Prompt answered", question=question, answer=decision)
            return decision


def confirm_continue(quiet: bool, temp_dir: str | Path | None = None) -> None:
    """
    Ask whether to go on with the installation.

    Args:
        quiet: Skip the question and continue
        temp_dir: Removed before cancelling when given

    Raises:
        InstallationCancelled: If the user answers no
    """
    if quiet:
        return
    if prompt_yes_no(CONTINUE_QUESTION):
        return

    if temp_dir is not None:
        cleanup(temp_dir)
    logger.info("Installation cancelled by user")
    raise InstallationCancelled("Installation cancelled by user")


# 🌶️📦🔚
