"""FastAPI dependencies for storage selection."""

from typing import Annotated, Iterator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from hr_admin.core.config import settings
from hr_admin.db.session import get_session
from hr_admin.storage.base import Storage
from hr_admin.storage.database import DatabaseStorage


def get_storage(request: Request, db: Session = Depends(get_session)) -> Iterator[Storage]:
    if settings.storage_backend == "memory":
        yield request.app.state.memory_storage
    else:
        yield DatabaseStorage(db)


StorageDep = Annotated[Storage, Depends(get_storage)]
