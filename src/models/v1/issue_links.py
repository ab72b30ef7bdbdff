import enum
from uuid import UUID

from sqlalchemy import Enum as SQLEnum, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ..base import BaseModel


class LinkType(str, enum.Enum):
    BLOCKS = "BLOCKS"
    IS_BLOCKED_BY = "IS_BLOCKED_BY"
    RELATES_TO = "RELATES_TO"
    DUPLICATES = "DUPLICATES"
    IS_DUPLICATED_BY = "IS_DUPLICATED_BY"


class IssueLinkModel(BaseModel):
    """
    Направленная связь между задачами.

    Attributes:
        type (LinkType): Вид связи.
        from_issue_id (UUID): Задача-источник.
        to_issue_id (UUID): Задача-цель.

    Constraints:
        Тройка (from_issue_id, to_issue_id, type) уникальна; связь задачи
        с самой собой запрещена сервисом.
    """

    __tablename__ = "issue_links"
    __table_args__ = (
        UniqueConstraint(
            "from_issue_id", "to_issue_id", "type", name="uq_issue_link"
        ),
    )

    type: Mapped[LinkType] = mapped_column(
        SQLEnum(
            LinkType,
            name="issue_link_type",
            create_constraint=True,
            validate_strings=True,
        ),
        nullable=False,
        comment="Вид связи",
    )
    from_issue_id: Mapped[UUID] = mapped_column(
        ForeignKey("issues.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID задачи-источника",
    )
    to_issue_id: Mapped[UUID] = mapped_column(
        ForeignKey("issues.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID задачи-цели",
    )

    def __repr__(self) -> str:
        return (
            f"<IssueLinkModel({self.from_issue_id} {self.type.value} {self.to_issue_id})>"
        )
