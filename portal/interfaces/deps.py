"""
API Dependencies — sessions, credential stores, token codec, repositories.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from portal.config import Settings, get_settings
from portal.infrastructure.database import get_db
from portal.application.services.token_codec import TokenCodec
from portal.domain.models.category import MainCategory, SubCategory
from portal.domain.models.faq import FAQ
from portal.domain.models.home_content import HomeContent
from portal.domain.models.latest_job import LatestJob
from portal.domain.models.system_prompt import SystemPrompt
from portal.domain.models.thumbnail import Thumbnail
from portal.domain.models.top_data import TopData
from portal.infrastructure.repositories.content_repository import SQLAlchemyContentRepository
from portal.infrastructure.repositories.credential_repository import (
    SQLAlchemyEmployeeStore,
    SQLAlchemyUserStore,
)
from portal.infrastructure.storage import ThumbnailStorage


def get_token_codec(settings: Settings = Depends(get_settings)) -> TokenCodec:
    """Codec bound to the configured secret."""
    return TokenCodec(settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def get_user_store(db: Session = Depends(get_db)) -> SQLAlchemyUserStore:
    return SQLAlchemyUserStore(db)


def get_employee_store(db: Session = Depends(get_db)) -> SQLAlchemyEmployeeStore:
    return SQLAlchemyEmployeeStore(db)


def get_thumbnail_storage(settings: Settings = Depends(get_settings)) -> ThumbnailStorage:
    return ThumbnailStorage(settings.UPLOAD_DIR, max_bytes=settings.THUMBNAIL_MAX_BYTES)


def get_main_category_repository(db: Session = Depends(get_db)) -> SQLAlchemyContentRepository[MainCategory]:
    return SQLAlchemyContentRepository(db, MainCategory, text_fields=("title",))


def get_sub_category_repository(db: Session = Depends(get_db)) -> SQLAlchemyContentRepository[SubCategory]:
    return SQLAlchemyContentRepository(
        db,
        SubCategory,
        text_fields=("meta_title", "content_title"),
        list_fields=("keywords", "tags"),
    )


def get_top_data_repository(db: Session = Depends(get_db)) -> SQLAlchemyContentRepository[TopData]:
    return SQLAlchemyContentRepository(
        db,
        TopData,
        text_fields=("meta_title", "content_title"),
        list_fields=("keywords", "tags"),
    )


def get_faq_repository(db: Session = Depends(get_db)) -> SQLAlchemyContentRepository[FAQ]:
    return SQLAlchemyContentRepository(
        db,
        FAQ,
        text_fields=("question", "answer"),
        default_order=(FAQ.order.asc(), FAQ.id.asc()),
    )


def get_system_prompt_repository(db: Session = Depends(get_db)) -> SQLAlchemyContentRepository[SystemPrompt]:
    return SQLAlchemyContentRepository(db, SystemPrompt)


def get_home_content_repository(db: Session = Depends(get_db)) -> SQLAlchemyContentRepository[HomeContent]:
    return SQLAlchemyContentRepository(db, HomeContent, text_fields=("title", "description"))


def get_latest_job_repository(db: Session = Depends(get_db)) -> SQLAlchemyContentRepository[LatestJob]:
    return SQLAlchemyContentRepository(
        db,
        LatestJob,
        text_fields=("meta_title", "content_title", "content_description"),
        list_fields=("keywords",),
    )


def get_thumbnail_repository(db: Session = Depends(get_db)) -> SQLAlchemyContentRepository[Thumbnail]:
    return SQLAlchemyContentRepository(db, Thumbnail, text_fields=("title", "description"))
