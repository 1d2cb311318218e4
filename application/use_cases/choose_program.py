"""
ChooseProgram Use Case.

Instantiates a catalog template as the user's current program. The user
gets a structural copy of the template's weeks, never a live reference, so
completing exercises never touches the catalog.
"""

import logging
from typing import List

from application.exceptions import NotFoundError
from application.ports import ProgramRepository
from application.use_cases.program_access import load_user_program
from domain.models import ProgramDocument

logger = logging.getLogger(__name__)


class ChooseProgramUseCase:
    """Assign a catalog template to a user, replacing their current program."""

    def __init__(self, program_repo: ProgramRepository) -> None:
        self._program_repo = program_repo

    def list_templates(self) -> List[ProgramDocument]:
        return [ProgramDocument.from_row(r) for r in self._program_repo.list_templates()]

    def get_current(self, user_id: str) -> ProgramDocument:
        return load_user_program(self._program_repo, user_id)

    def execute(self, user_id: str, template_id: str) -> ProgramDocument:
        """
        Copy a template into a program owned by user_id.

        Raises:
            NotFoundError: If template_id is not a catalog template
            PersistenceError: If the repository fails
        """
        row = self._program_repo.get_template(template_id)
        if not row:
            logger.warning(f"Template {template_id} not found")
            raise NotFoundError("Program template not found")

        template = ProgramDocument.from_row(row)
        stored = self._program_repo.assign_to_user(
            user_id,
            {
                "name": template.name,
                "description": template.description,
                "duration": template.duration,
                "workouts": template.copy_workouts(),
            },
        )
        logger.info(f"User {user_id} chose program template {template_id}")
        return ProgramDocument.from_row(stored)
