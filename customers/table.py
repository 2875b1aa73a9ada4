"""Схема колонок таблицы клиентов, поиск и сортировка на стороне сервера."""
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional

from .models import Customer

DATE_FORMAT = '%d/%m/%Y'
ASC = 'asc'
DESC = 'desc'


def format_date(value: datetime) -> str:
    """Дата в формате DD/MM/YYYY."""
    return value.strftime(DATE_FORMAT)


@dataclass(frozen=True)
class Column:
    key: str
    label: str
    sortable: bool = True
    formatter: Optional[Callable[[object], str]] = None

    def display(self, customer: Customer) -> str:
        value = getattr(customer, self.key)
        if self.formatter is not None:
            return self.formatter(value)
        return str(value)


COLUMNS = [
    Column('name', 'Name'),
    Column('contact', 'Contact'),
    Column('phone', 'Phone'),
    Column('date_added', 'Date Added', formatter=format_date),
]
COLUMNS_BY_KEY = {c.key: c for c in COLUMNS}


def get_column(key: str) -> Column:
    try:
        return COLUMNS_BY_KEY[key]
    except KeyError:
        raise LookupError(f'Unknown column: {key}') from None


@dataclass
class SortState:
    """Активная колонка и направление; key=None означает «без сортировки»."""
    key: Optional[str] = None
    order: Optional[str] = None

    def order_for(self, key: str) -> Optional[str]:
        return self.order if self.key == key else None

    def toggle(self, key: str) -> None:
        """Цикл по колонке: без сортировки -> asc -> desc -> без сортировки."""
        if not get_column(key).sortable:
            raise ValueError(f'Column is not sortable: {key}')
        current = self.order_for(key)
        if current is None:
            self.key, self.order = key, ASC
        elif current == ASC:
            self.order = DESC
        else:
            self.key, self.order = None, None


def sort_caret(order: Optional[str]) -> str:
    """CSS-класс иконки направления сортировки."""
    if not order:
        return 'fa-sort'
    return f'fa-sort-{order}'


def display_values(customer: Customer) -> Dict[str, str]:
    return {c.key: c.display(customer) for c in COLUMNS}


def search_customers(customers: Iterable[Customer], term: str) -> List[Customer]:
    """Подстрока без учёта регистра по отображаемым значениям колонок."""
    term = (term or '').lower()
    if not term:
        return list(customers)
    return [
        c for c in customers
        if any(term in value.lower() for value in display_values(c).values())
    ]


def _sort_key(key: str):
    def extract(customer: Customer):
        value = getattr(customer, key)
        if isinstance(value, str):
            return value.lower()
        return value
    return extract


def sort_customers(customers: Iterable[Customer], state: SortState) -> List[Customer]:
    rows = list(customers)
    if state.key is None:
        return rows
    return sorted(rows, key=_sort_key(state.key), reverse=state.order == DESC)


def visible_rows(customers: Iterable[Customer], term: str, state: SortState) -> List[Customer]:
    return sort_customers(search_customers(customers, term), state)
