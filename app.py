"""Точка входа Flask-приложения со страницей клиентов на демонстрационных данных."""
import logging
import os
from typing import Optional

from flask import Flask

from customers.page import CustomersPage
from customers.routes import PAGE_EXTENSION_KEY, customers_bp
from customers.sample_data import DEFAULT_SAMPLE_SIZE, seeded_provider

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def load_config() -> dict:
    """Настройки из переменных окружения."""
    return {
        'SECRET_KEY': os.environ.get('SECRET_KEY', 'dev-secret'),
        'LOG_LEVEL': os.environ.get('LOG_LEVEL', 'INFO').upper(),
        'CUSTOMERS_SAMPLE_SIZE': int(os.environ.get('CUSTOMERS_SAMPLE_SIZE', DEFAULT_SAMPLE_SIZE)),
        'CUSTOMERS_SAMPLE_SEED': int(os.environ.get('CUSTOMERS_SAMPLE_SEED', 42)),
    }


def configure_logging(level: str) -> None:
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def create_app(config: Optional[dict] = None) -> Flask:
    """Создаёт экземпляр Flask, заполняет таблицу и регистрирует блюпринт.

    config позволяет переопределить настройки окружения; ключ
    CUSTOMERS_PROVIDER задаёт собственный источник начальных данных.
    """
    app = Flask(__name__)
    app.config.from_mapping(load_config())
    if config:
        app.config.from_mapping(config)

    configure_logging(app.config['LOG_LEVEL'])

    provider = app.config.get('CUSTOMERS_PROVIDER') or seeded_provider(
        app.config['CUSTOMERS_SAMPLE_SEED'], app.config['CUSTOMERS_SAMPLE_SIZE'],
    )
    app.extensions[PAGE_EXTENSION_KEY] = CustomersPage(provider())

    app.register_blueprint(customers_bp)
    logging.getLogger(__name__).info(
        'Customers page ready with %s records', len(app.extensions[PAGE_EXTENSION_KEY].customers),
    )
    return app


app = create_app()


if __name__ == '__main__':
    port = int(os.environ.get('APP_PORT', 5000))
    app.run(host='0.0.0.0', port=port)
