"""Модели данных клиента и частичного обновления записи."""
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Dict, Mapping, Optional

EDITABLE_FIELDS = ('name', 'contact', 'phone')
REQUIRED_FIELDS = EDITABLE_FIELDS
# Поля, которые модальное окно может вернуть при редактировании; игнорируются
STAMPED_FIELDS = ('customer_id', 'date_added')


@dataclass
class Customer:
    """Клиент в таблице."""
    customer_id: int
    name: str
    contact: str
    phone: str
    date_added: datetime = field(default_factory=datetime.now)


@dataclass
class CustomerUpdate:
    """Частичное обновление: только редактируемые поля, None означает «не менять»."""
    name: Optional[str] = None
    contact: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> 'CustomerUpdate':
        unknown = [k for k in data if k not in EDITABLE_FIELDS and k not in STAMPED_FIELDS]
        if unknown:
            raise ValueError(f"Unknown customer fields: {', '.join(sorted(unknown))}")
        return cls(**{k: str(data[k]) for k in EDITABLE_FIELDS if data.get(k) is not None})

    def fields(self) -> Dict[str, str]:
        return {k: getattr(self, k) for k in EDITABLE_FIELDS if getattr(self, k) is not None}

    def apply_to(self, customer: Customer) -> Customer:
        """Сливает заданные поля поверх записи, сохраняя ID и дату создания."""
        return replace(customer, **self.fields())


def is_complete(values: Mapping[str, object]) -> bool:
    """Все обязательные поля заполнены непустыми строками."""
    return all(isinstance(values.get(k), str) and values.get(k) != '' for k in REQUIRED_FIELDS)
