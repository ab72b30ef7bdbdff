from typing import Optional
from uuid import UUID

from sqlalchemy import BigInteger, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from ..base import BaseModel


class AttachmentModel(BaseModel):
    """
    Вложение задачи. Байты файла лежат в S3, здесь только ссылка.

    Attributes:
        issue_id (UUID): Задача.
        uploader_id (UUID): Кто загрузил.
        file_name (str): Исходное имя файла.
        file_key (str): Ключ объекта в хранилище.
        file_url (Optional[str]): Публичный URL.
        file_size (int): Размер в байтах.
        mime_type (Optional[str]): MIME тип.
    """

    __tablename__ = "attachments"

    issue_id: Mapped[UUID] = mapped_column(
        ForeignKey("issues.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID задачи",
    )
    uploader_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="UUID загрузившего",
    )
    file_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Имя файла",
    )
    file_key: Mapped[str] = mapped_column(
        String(512),
        nullable=False,
        comment="Ключ объекта в хранилище",
    )
    file_url: Mapped[Optional[str]] = mapped_column(
        String(1024),
        nullable=True,
        comment="URL файла",
    )
    file_size: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        default=0,
        comment="Размер файла в байтах",
    )
    mime_type: Mapped[Optional[str]] = mapped_column(
        String(127),
        nullable=True,
        comment="MIME тип",
    )
