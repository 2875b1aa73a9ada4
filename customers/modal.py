"""Модальное окно создания и редактирования клиента."""
import enum
import logging
from typing import Callable, Dict, Optional

from .models import EDITABLE_FIELDS, Customer, is_complete

logger = logging.getLogger(__name__)


class ModalState(enum.Enum):
    CLOSED = 'closed'
    OPEN_CREATE = 'open_create'
    OPEN_EDIT = 'open_edit'


def empty_draft() -> Dict[str, str]:
    return {k: '' for k in EDITABLE_FIELDS}


class CustomerModal:
    """Черновик клиента, которым владеет окно, пока оно открыто.

    Результат передаётся наружу только через on_close: None при отмене,
    словарь полей при сохранении.
    """

    def __init__(self, on_close: Callable[[Optional[dict]], None]):
        self.on_close = on_close
        self.is_open = False
        self.existing: Optional[Customer] = None
        self.draft = empty_draft()

    @property
    def state(self) -> ModalState:
        if not self.is_open:
            return ModalState.CLOSED
        return ModalState.OPEN_EDIT if self.existing else ModalState.OPEN_CREATE

    @property
    def title(self) -> str:
        return 'Edit Customer' if self.existing else 'Create Customer'

    def open(self, existing: Optional[Customer] = None) -> None:
        if self.is_open:
            raise RuntimeError('Modal is already open')
        self.is_open = True
        self.set_existing(existing)

    def set_existing(self, existing: Optional[Customer]) -> None:
        """Новая исходная запись заменяет черновик её текущими значениями."""
        self.existing = existing
        if existing is not None:
            self.draft = {k: getattr(existing, k) for k in EDITABLE_FIELDS}

    def change(self, field: str, value: str) -> None:
        if field not in EDITABLE_FIELDS:
            raise ValueError(f'Unknown field: {field}')
        self.draft[field] = value

    def is_valid(self) -> bool:
        return is_complete(self.draft)

    @property
    def can_save(self) -> bool:
        return self.is_open and self.is_valid()

    def _reset(self) -> None:
        self.draft = empty_draft()
        self.existing = None
        self.is_open = False

    def cancel(self) -> None:
        self._reset()
        self.on_close(None)

    def save(self) -> bool:
        """Возвращает False и ничего не меняет, пока черновик невалиден."""
        if not self.can_save:
            logger.debug('Save ignored: draft incomplete or modal closed')
            return False
        result = dict(self.draft)
        if self.existing is not None:
            result['customer_id'] = self.existing.customer_id
            result['date_added'] = self.existing.date_added
        self._reset()
        self.on_close(result)
        return True
