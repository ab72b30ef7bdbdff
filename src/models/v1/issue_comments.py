from uuid import UUID

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..base import BaseModel


class IssueCommentModel(BaseModel):
    """
    Комментарий к задаче.

    Attributes:
        issue_id (UUID): Задача.
        author_id (UUID): Автор комментария.
        content (str): Текст (1-10000 символов).
    """

    __tablename__ = "issue_comments"

    issue_id: Mapped[UUID] = mapped_column(
        ForeignKey("issues.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID задачи",
    )
    author_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID автора комментария",
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Текст комментария",
    )

    def __repr__(self) -> str:
        return f"<IssueCommentModel(id={self.id}, issue_id={self.issue_id})>"
