"""Экспорт видимых строк таблицы клиентов в Excel."""
import io
from typing import List

import pandas as pd

from .models import Customer
from .table import COLUMNS, display_values

EXPORT_COLUMNS = [c.label for c in COLUMNS]
SHEET_NAME = 'Customers'


def _store_as_text(worksheet) -> None:
    """openpyxl считает строки с '=' формулами; в выгрузке они остаются текстом."""
    for row in worksheet.iter_rows(min_row=2):
        for cell in row:
            if cell.data_type == 'f':
                cell.data_type = 's'


def export_to_excel(customers: List[Customer]) -> bytes:
    """Возвращает байты Excel-файла с переданными строками в порядке отображения."""
    data = []
    for customer in customers:
        values = display_values(customer)
        data.append({c.label: values[c.key] for c in COLUMNS})
    df = pd.DataFrame(data, columns=EXPORT_COLUMNS)
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
        df.to_excel(writer, index=False, sheet_name=SHEET_NAME)
        _store_as_text(writer.sheets[SHEET_NAME])
    buffer.seek(0)
    return buffer.read()
