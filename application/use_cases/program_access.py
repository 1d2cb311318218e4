"""
Shared program lookup for use cases acting on a user's program.
"""

import logging
from typing import Optional

from application.exceptions import NotFoundError
from application.ports import ProgramRepository
from domain.models import ProgramDocument

logger = logging.getLogger(__name__)


def load_user_program(
    program_repo: ProgramRepository,
    user_id: str,
    program_id: Optional[str] = None,
) -> ProgramDocument:
    """
    Fetch a program owned by user_id.

    Args:
        program_repo: Program repository
        user_id: The acting user
        program_id: Explicit program; None means the user's current program

    Returns:
        The program document

    Raises:
        NotFoundError: If the program does not exist or belongs to someone else
    """
    if program_id is None:
        row = program_repo.get_current_for_user(user_id)
    else:
        row = program_repo.get_by_id(program_id)

    if not row or row.get("user_id") != user_id:
        logger.warning(f"Program {program_id or '<current>'} not found for user {user_id}")
        raise NotFoundError("Program not found")

    return ProgramDocument.from_row(row)
