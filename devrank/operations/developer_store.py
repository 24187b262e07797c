"""
Developer Store - point lookups, creation and counts for Developer records.

Key functionality:
- get_by_id() / get_by_username(): lookups returning None on a miss
- *_required() variants raising NotFoundError
- create(): attribute validation and insert, raising ValidationError
- count() / count_for_developer(): population and repository counts

Uniqueness of usernames is checked before the insert and enforced again by
the database constraint, so concurrent creators cannot store duplicates.
"""

from datetime import datetime
from numbers import Real
from typing import Any, Dict, Mapping, Optional
from contextlib import asynccontextmanager
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from devrank.constants import DeveloperConstants
from devrank.database.models import Developer, Repository
from devrank.utils.exceptions import NotFoundError, ValidationError
from devrank.utils.logger import setup_logger

logger = setup_logger(__name__)

UNIQUE_FIELDS = ("username", "github_id")


class DeveloperStore:
    """
    Thin storage operations for Developer records.

    Every method accepts an optional session so it can take part in a caller's
    transaction; without one it opens and manages its own.
    """

    def __init__(self, database):
        """Initialize with database instance"""
        self.db = database
        self.logger = logger

    @asynccontextmanager
    async def _get_session_context(self, session: Optional[AsyncSession] = None):
        """
        Provides a session context. Uses the provided session if available,
        otherwise creates and manages a new session.
        """
        if session:
            yield session
        else:
            async with self.db.get_session() as new_session:
                yield new_session

    async def get_by_id(self, developer_id: int, session: Optional[AsyncSession] = None) -> Optional[Developer]:
        """Get a single developer by id"""
        async with self._get_session_context(session) as s:
            return await s.get(Developer, developer_id)

    async def get_by_id_required(self, developer_id: int, session: Optional[AsyncSession] = None) -> Developer:
        """Get a single developer by id, raising NotFoundError if it does not exist"""
        developer = await self.get_by_id(developer_id, session=session)
        if developer is None:
            raise NotFoundError("Developer", "id", developer_id)
        return developer

    async def get_by_username(self, username: str, session: Optional[AsyncSession] = None) -> Optional[Developer]:
        """Get a single developer by username"""
        async with self._get_session_context(session) as s:
            result = await s.execute(
                select(Developer).where(Developer.username == username)
            )
            return result.scalar_one_or_none()

    async def get_by_username_required(self, username: str, session: Optional[AsyncSession] = None) -> Developer:
        """Get a single developer by username, raising NotFoundError if it does not exist"""
        developer = await self.get_by_username(username, session=session)
        if developer is None:
            raise NotFoundError("Developer", "username", username)
        return developer

    async def create(self, attributes: Mapping[str, Any], session: Optional[AsyncSession] = None) -> Developer:
        """
        Create a developer from validated attributes.

        Args:
            attributes: Developer fields; see DeveloperConstants for the
                required and optional keys
            session: Optional caller-managed session

        Returns:
            Developer: The newly created record with its id assigned

        Raises:
            ValidationError: If attributes are missing, malformed, or collide
                with an existing developer's username or github_id
        """
        errors = self._validate_attributes(attributes)
        if errors:
            raise ValidationError(errors)

        async with self._get_session_context(session) as s:
            taken = await self._find_taken_unique_fields(s, attributes)
            if taken:
                raise ValidationError(taken)

            developer = Developer(**dict(attributes))

            try:
                if session:
                    # Savepoint: a constraint violation undoes only this insert
                    async with s.begin_nested():
                        s.add(developer)
                else:
                    s.add(developer)
                    await s.commit()
            except IntegrityError as e:
                if not session:
                    await s.rollback()
                fields = self._unique_violation_fields(e)
                if not fields:
                    raise
                raise ValidationError(fields) from e

            await s.refresh(developer)
            self.logger.info(f"Created Developer {developer.id} ({developer.username})")
            return developer

    async def count(self, session: Optional[AsyncSession] = None) -> int:
        """Get developers count"""
        async with self._get_session_context(session) as s:
            return await s.scalar(select(func.count(Developer.id))) or 0

    async def count_for_developer(self, developer: Developer, session: Optional[AsyncSession] = None) -> int:
        """Get repositories count of a developer"""
        async with self._get_session_context(session) as s:
            query = select(func.count(Repository.id)).where(Repository.developer_id == developer.id)
            return await s.scalar(query) or 0

    def _validate_attributes(self, attributes: Mapping[str, Any]) -> Dict[str, str]:
        """Return a field -> reason mapping for every invalid attribute."""
        errors: Dict[str, str] = {}
        allowed = set(DeveloperConstants.REQUIRED_FIELDS) | set(DeveloperConstants.OPTIONAL_FIELDS)

        for field in attributes:
            if field not in allowed:
                errors[field] = "is not a known field"

        for field in DeveloperConstants.REQUIRED_FIELDS:
            if attributes.get(field) is None:
                errors[field] = "can't be blank"

        username = attributes.get("username")
        if username is not None and (not isinstance(username, str) or not username.strip()):
            errors["username"] = "can't be blank"

        score = attributes.get("score")
        if score is not None and (isinstance(score, bool) or not isinstance(score, Real)):
            errors["score"] = "must be a number"

        for field in DeveloperConstants.COUNT_FIELDS:
            value = attributes.get(field)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                errors[field] = "must be an integer"
            elif value < 0:
                errors[field] = "must be greater than or equal to 0"

        created_at = attributes.get("github_created_at")
        if created_at is not None and not isinstance(created_at, datetime):
            errors["github_created_at"] = "must be a datetime"

        for field in ("location_id", "github_id"):
            value = attributes.get(field)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                errors[field] = "must be an integer"

        return errors

    async def _find_taken_unique_fields(self, session: AsyncSession, attributes: Mapping[str, Any]) -> Dict[str, str]:
        taken = {}
        for field in UNIQUE_FIELDS:
            value = attributes.get(field)
            if value is None:
                continue
            column = getattr(Developer, field)
            existing = await session.scalar(select(Developer.id).where(column == value))
            if existing is not None:
                taken[field] = "has already been taken"
        return taken

    def _unique_violation_fields(self, error: IntegrityError) -> Dict[str, str]:
        message = str(error.orig).lower()
        return {
            field: "has already been taken"
            for field in UNIQUE_FIELDS
            if field in message
        }
