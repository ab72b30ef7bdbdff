from typing import Annotated

from fastapi import Depends

from src.core.dependencies.database import AsyncSessionDep
from src.core.dependencies.storage import StorageDep
from src.services.v1.attachments import AttachmentService


async def get_attachment_service(
    session: AsyncSessionDep, storage: StorageDep
) -> AttachmentService:
    return AttachmentService(session=session, storage=storage)


AttachmentServiceDep = Annotated[AttachmentService, Depends(get_attachment_service)]
