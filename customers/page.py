"""Состояние страницы «Customers»: список клиентов, модальное окно, поиск и сортировка."""
import logging
from datetime import datetime
from typing import Callable, List, Optional

from .modal import CustomerModal
from .models import Customer, CustomerUpdate
from .table import SortState, sort_caret, visible_rows

logger = logging.getLogger(__name__)


class CustomersPage:
    """Владеет списком клиентов; изменяет его только обработчик закрытия окна."""

    def __init__(self, customers: List[Customer], now: Callable[[], datetime] = datetime.now):
        self.customers = list(customers)
        self.now = now
        self.edit_customer: Optional[Customer] = None
        self.sort = SortState()
        self.search = ''
        self.modal = CustomerModal(on_close=self.on_modal_closed)

    def find(self, customer_id: int) -> Optional[Customer]:
        return next((c for c in self.customers if c.customer_id == customer_id), None)

    def open_create(self) -> None:
        self.edit_customer = None
        self.modal.open()

    def open_edit(self, customer_id: int) -> None:
        customer = self.find(customer_id)
        if customer is None:
            raise LookupError(f'Customer not found: {customer_id}')
        self.edit_customer = customer
        self.modal.open(existing=customer)

    def on_modal_closed(self, result: Optional[dict]) -> None:
        if result is not None:
            if self.edit_customer is not None:
                self._merge(self.edit_customer.customer_id, CustomerUpdate.from_mapping(result))
            else:
                self._insert(CustomerUpdate.from_mapping(result))
        self.edit_customer = None

    def _merge(self, customer_id: int, update: CustomerUpdate) -> None:
        for idx, customer in enumerate(self.customers):
            if customer.customer_id == customer_id:
                self.customers[idx] = update.apply_to(customer)
                logger.info('Customer %s updated', customer_id)
                return
        logger.debug('Edit target %s no longer present, update dropped', customer_id)

    def _next_id(self) -> int:
        new_id = len(self.customers) + 1
        if self.find(new_id) is not None:
            fallback = max(c.customer_id for c in self.customers) + 1
            logger.debug('Id %s already taken, using %s', new_id, fallback)
            return fallback
        return new_id

    def _insert(self, update: CustomerUpdate) -> None:
        values = update.fields()
        customer = Customer(
            customer_id=self._next_id(),
            name=values.get('name', ''),
            contact=values.get('contact', ''),
            phone=values.get('phone', ''),
            date_added=self.now(),
        )
        self.customers.insert(0, customer)
        logger.info('Customer %s created', customer.customer_id)

    def toggle_sort(self, key: str) -> None:
        self.sort.toggle(key)

    def set_search(self, term: Optional[str]) -> None:
        self.search = term or ''

    def caret_for(self, key: str) -> str:
        return sort_caret(self.sort.order_for(key))

    def visible_rows(self) -> List[Customer]:
        return visible_rows(self.customers, self.search, self.sort)
