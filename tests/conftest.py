from datetime import datetime

import pytest

from app import create_app
from customers.models import Customer


def make_customers():
    return [
        Customer(0, 'Abbott LLC', 'Rustic Steel Chair', '555-201-0001', datetime(2024, 3, 5, 9, 30)),
        Customer(1, 'Baker-Collins', 'Sleek Cotton Shirt', '555-201-0002', datetime(2023, 11, 20)),
        Customer(2, 'Quigley Group', 'Generic Wooden Table', '555-201-0003', datetime(2024, 1, 15)),
        Customer(3, 'Towne and Sons', 'Awesome Granite Hat', '555-201-0004', datetime(2023, 7, 1)),
    ]


@pytest.fixture()
def customers():
    return make_customers()


@pytest.fixture()
def app(monkeypatch):
    monkeypatch.setenv('SECRET_KEY', 'test-secret')
    monkeypatch.setenv('LOG_LEVEL', 'DEBUG')
    flask_app = create_app({'TESTING': True, 'CUSTOMERS_PROVIDER': make_customers})
    return flask_app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def page(app):
    return app.extensions['customers_page']
