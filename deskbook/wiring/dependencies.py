from functools import lru_cache
import logging

from deskbook.application.ports.code_channel import CodeChannelPort
from deskbook.application.ports.notifier import NotifierPort
from deskbook.application.ports.record_store import RecordStorePort
from deskbook.application.ports.session_store import ConfirmationSessionStorePort
from deskbook.application.ports.site_settings import SiteSettingsPort
from deskbook.application.ports.workspace_catalog import WorkspaceCatalogPort
from deskbook.application.use_cases.booking import BookingUseCase
from deskbook.application.use_cases.notify import NotifyUseCase
from deskbook.core.config import settings
from deskbook.infrastructure.catalog.seed_data import seed_site_settings, seed_workspace_types
from deskbook.infrastructure.catalog.site_settings_store import SiteSettingsStore
from deskbook.infrastructure.catalog.workspace_catalog_store import WorkspaceCatalogStore
from deskbook.infrastructure.messaging.mock_channel import MockCodeChannel
from deskbook.infrastructure.messaging.whatsapp_channel import WhatsAppCodeChannel
from deskbook.infrastructure.messaging.whatsapp_client import WhatsAppClient
from deskbook.infrastructure.session.memory_session_store import MemorySessionStore
from deskbook.infrastructure.store.json_store import JsonRecordStore
from deskbook.infrastructure.store.memory_store import MemoryRecordStore
from deskbook.infrastructure.store.postgrest_store import PostgrestRecordStore
from deskbook.infrastructure.webhooks.mock_notifier import MockNotifier
from deskbook.infrastructure.webhooks.webhook_notifier import WebhookNotifier


logger = logging.getLogger(__name__)

_record_store: RecordStorePort | None = None


def get_record_store() -> RecordStorePort:
    global _record_store
    if _record_store is None:
        if settings.SUPABASE_URL:
            logger.info("Using PostgrestRecordStore")
            _record_store = PostgrestRecordStore()
        else:
            if settings.is_local:
                logger.info("Using JsonRecordStore (ENV=%s)", settings.ENV)
                _record_store = JsonRecordStore(data_dir=settings.JSON_STORE_DATA_DIR)
            else:
                logger.info("Using MemoryRecordStore")
                _record_store = MemoryRecordStore()
            if settings.SEED_WORKSPACE_TYPES:
                seed_workspace_types(_record_store)
                seed_site_settings(_record_store)
    return _record_store


def get_workspace_catalog() -> WorkspaceCatalogPort:
    return WorkspaceCatalogStore(get_record_store())


def get_site_settings() -> SiteSettingsPort:
    return SiteSettingsStore(get_record_store())


@lru_cache
def get_session_store() -> ConfirmationSessionStorePort:
    return MemorySessionStore(ttl_seconds=settings.CONFIRMATION_SESSION_TTL_SECONDS)


@lru_cache
def get_code_channel() -> CodeChannelPort:
    if not settings.WHATSAPP_ACCESS_TOKEN or not settings.WHATSAPP_PHONE_NUMBER_ID:
        if settings.is_local:
            logger.info("Using MockCodeChannel (WhatsApp credentials missing, ENV=dev/local)")
            return MockCodeChannel()
        raise ValueError("WHATSAPP_ACCESS_TOKEN and WHATSAPP_PHONE_NUMBER_ID are required to send codes.")

    client = WhatsAppClient(
        access_token=settings.WHATSAPP_ACCESS_TOKEN,
        phone_number_id=settings.WHATSAPP_PHONE_NUMBER_ID,
        api_version=settings.WHATSAPP_API_VERSION,
    )
    return WhatsAppCodeChannel(client=client)


@lru_cache
def get_notifier() -> NotifierPort:
    if settings.NOTIFIER_WEBHOOK_URL:
        return WebhookNotifier(url=settings.NOTIFIER_WEBHOOK_URL)
    logger.info("Using MockNotifier (NOTIFIER_WEBHOOK_URL not set)")
    return MockNotifier()


def get_booking_use_case() -> BookingUseCase:
    return BookingUseCase(
        store=get_record_store(),
        catalog=get_workspace_catalog(),
        code_channel=get_code_channel(),
        notify=NotifyUseCase(notifier=get_notifier()),
        sessions=get_session_store(),
        business_name=settings.BUSINESS_NAME,
    )
