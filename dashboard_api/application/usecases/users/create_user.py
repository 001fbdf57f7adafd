"""
===============================================================================
USE CASE: Create User
===============================================================================

Business Goal:
    Self-service registration from the "create user" form. The user stays on
    the form and is told to go and sign in; there is no redirect.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    CreateUserUseCase

Responsibilities:
    - Validate firstname / lastname / profile / email / password (UserForm).
    - Derive the display name ("firstname lastname").
    - Stamp the creation date in the configured local timezone.
    - Hash the password (the plaintext never leaves this method).
    - Insert one row; collapse any storage failure (duplicate email included)
      into a single message.
    - Revalidate the user-creation view and render the success message.

Collaborators:
    - UserRepository.create_user(NewUser)
    - PasswordHasher.hash(password)
    - ViewRevalidator.revalidate_path(path)
===============================================================================
"""

from __future__ import annotations

from typing import Any, Mapping

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.entities import NewUser
from ....domain.repositories import UserRepository
from ....domain.services import PasswordHasher, ViewRevalidator
from ...dates import Today, local_today_factory
from ...form_state import FormState, Rendered
from ...validation import UserForm, validate_form

CREATE_USER_PATH = "/createuser"

MISSING_FIELDS_MESSAGE = "Missing Fields. Failed to Create User."
DATABASE_ERROR_MESSAGE = "Database Error: Failed to Create User."
SUCCESS_MESSAGE = "User created successfully, navigate to the login page and login"


class CreateUserUseCase:
    def __init__(
        self,
        repository: UserRepository,
        password_hasher: PasswordHasher,
        revalidator: ViewRevalidator,
        today: Today | None = None,
    ) -> None:
        self._users = repository
        self._hasher = password_hasher
        self._views = revalidator
        self._today = today or local_today_factory()

    def execute(
        self, previous_state: FormState | None, form_data: Mapping[str, Any]
    ) -> Rendered:
        validation = validate_form(UserForm, form_data)
        if not validation.ok:
            return Rendered(
                FormState(errors=validation.errors, message=MISSING_FIELDS_MESSAGE)
            )

        form = validation.data
        user = NewUser(
            firstname=form.firstname,
            lastname=form.lastname,
            name=form.firstname + " " + form.lastname,
            profile=form.profile,
            email=form.email,
            password_hash=self._hasher.hash(form.password),
            createddate=self._today(),
        )

        try:
            self._users.create_user(user)
        except DatabaseError as exc:
            logger.warning(
                "create user failed",
                extra={"email": user.email, "error_id": exc.error_id},
            )
            return Rendered(FormState(message=DATABASE_ERROR_MESSAGE))

        logger.info(
            "user created",
            extra={"email": user.email, "profile": user.profile.value},
        )
        self._views.revalidate_path(CREATE_USER_PATH)
        return Rendered(FormState(success=SUCCESS_MESSAGE))
