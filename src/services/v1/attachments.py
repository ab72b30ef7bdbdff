"""
Сервис вложений задач.

Загрузка файлов выполняется клиентом напрямую в хранилище; здесь только
список вложений и удаление: сначала файл по ключу, затем запись.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import (AttachmentAccessDeniedError,
                                 AttachmentNotFoundError, IssueNotFoundError)
from src.core.integrations.storages import AbstractStorageBackend
from src.models.v1.attachments import AttachmentModel
from src.repository.v1.attachments import AttachmentRepository
from src.repository.v1.issues import IssueContext, IssueRepository
from src.schemas.v1.users import UserCurrentSchema
from src.services.base import BaseService, command
from src.services.v1.access import AccessService


class AttachmentService(BaseService):
    """
    Args:
        session: Сессия базы данных.
        storage: Хранилище файлов вложений.
    """

    def __init__(self, session: AsyncSession, storage: AbstractStorageBackend):
        super().__init__(session)
        self.storage = storage
        self.repository = AttachmentRepository(session)
        self.issue_repository = IssueRepository(session)
        self.access = AccessService(session)

    async def _get_issue_context(self, issue_id: UUID) -> IssueContext:
        context = await self.issue_repository.get_context(issue_id)
        if context is None:
            raise IssueNotFoundError(issue_id)
        return context

    @command("attachment.list")
    async def list_attachments(
        self, user: Optional[UserCurrentSchema], issue_id: UUID
    ) -> List[AttachmentModel]:
        user = self._require_user(user)
        context = await self._get_issue_context(issue_id)
        await self.access.require_access(user.id, context.workspace)
        return await self.repository.list_by_issue(issue_id)

    @command("attachment.delete")
    async def delete_attachment(
        self, user: Optional[UserCurrentSchema], attachment_id: UUID
    ) -> UUID:
        """
        Удаляет вложение.

        Raises:
            AttachmentNotFoundError: Вложение не найдено.
            AttachmentAccessDeniedError: Не загрузивший и не владелец/ADMIN.
        """
        user = self._require_user(user)
        attachment = await self.repository.get_item_by_id(attachment_id)
        if attachment is None:
            raise AttachmentNotFoundError(attachment_id)

        context = await self._get_issue_context(attachment.issue_id)
        access = await self.access.require_access(user.id, context.workspace)
        if attachment.uploader_id != user.id and not access.is_elevated:
            raise AttachmentAccessDeniedError(attachment_id)

        removed = await self.storage.delete_file(attachment.file_key)
        if not removed:
            self.logger.warning(
                "Файл вложения %s уже отсутствовал в хранилище", attachment.file_key
            )
        await self.repository.delete_item(attachment)
        self.logger.info(
            "Удалено вложение %s задачи %s", attachment.file_name, context.issue.key
        )
        return attachment_id
