"""Генератор демонстрационных клиентов для начального заполнения таблицы."""
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from faker import Faker

from .models import Customer

DEFAULT_SAMPLE_SIZE = 10
LOCALE = 'en_US'


def make_faker(seed: Optional[int] = None) -> Faker:
    fake = Faker(LOCALE)
    if seed is not None:
        fake.seed_instance(seed)
    return fake


def phone_number(fake: Faker) -> str:
    """Номер в формате ###-###-####, код зоны не начинается с 0."""
    return fake.numerify('%##-%##-####')


def past_date(fake: Faker, now: datetime, years: int = 1) -> datetime:
    return fake.date_time_between(start_date=now - timedelta(days=365 * years), end_date=now)


def generate_customers(
    count: int = DEFAULT_SAMPLE_SIZE,
    fake: Optional[Faker] = None,
    now: Optional[datetime] = None,
) -> List[Customer]:
    """Возвращает count клиентов с ID 0..count-1.

    Экземпляр Faker передаётся явно, чтобы тесты были детерминированы.
    """
    fake = fake or make_faker()
    now = now or datetime.now()
    return [
        Customer(
            customer_id=index,
            name=fake.company(),
            contact=fake.catch_phrase(),
            phone=phone_number(fake),
            date_added=past_date(fake, now),
        )
        for index in range(count)
    ]


def seeded_provider(
    seed: int,
    count: int = DEFAULT_SAMPLE_SIZE,
    now: Optional[datetime] = None,
) -> Callable[[], List[Customer]]:
    """Провайдер данных для фабрики приложения с фиксированным seed и опорной датой."""
    now = now or datetime.now()

    def provide() -> List[Customer]:
        return generate_customers(count, fake=make_faker(seed), now=now)

    return provide
