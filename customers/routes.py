"""Маршруты Flask для страницы клиентов: таблица, модальное окно, экспорт."""
import logging
from datetime import datetime
from io import BytesIO

from flask import (
    Blueprint,
    abort,
    current_app,
    flash,
    jsonify,
    redirect,
    render_template,
    request,
    send_file,
    url_for,
)

from .excel_io import export_to_excel
from .models import EDITABLE_FIELDS, CustomerUpdate
from .page import CustomersPage
from .table import COLUMNS, display_values

customers_bp = Blueprint('customers', __name__)
PAGE_EXTENSION_KEY = 'customers_page'

logger = logging.getLogger(__name__)


def get_page() -> CustomersPage:
    return current_app.extensions[PAGE_EXTENSION_KEY]


def _index_url(page: CustomersPage) -> str:
    if page.search:
        return url_for('customers.index', search=page.search)
    return url_for('customers.index')


def _render_page(page: CustomersPage, status: int = 200):
    rows = [
        {'customer_id': c.customer_id, 'values': display_values(c)}
        for c in page.visible_rows()
    ]
    carets = {c.key: page.caret_for(c.key) for c in COLUMNS}
    return render_template(
        'customers.html',
        columns=COLUMNS,
        rows=rows,
        carets=carets,
        search=page.search,
        modal=page.modal,
        fields=EDITABLE_FIELDS,
    ), status


@customers_bp.route('/')
def index():
    page = get_page()
    if 'search' in request.args:
        page.set_search(request.args.get('search', ''))
    return _render_page(page)


@customers_bp.route('/health')
def health():
    return jsonify({'ok': True})


@customers_bp.route('/sort/<key>', methods=['POST'])
def toggle_sort(key: str):
    page = get_page()
    try:
        page.toggle_sort(key)
    except (LookupError, ValueError):
        abort(404)
    return redirect(_index_url(page))


@customers_bp.route('/customers/new')
def new_customer():
    page = get_page()
    if page.modal.is_open:
        page.modal.cancel()
    page.open_create()
    return _render_page(page)


@customers_bp.route('/customers/<int:customer_id>/edit')
def edit_customer(customer_id: int):
    page = get_page()
    if page.find(customer_id) is None:
        abort(404)
    if page.modal.is_open:
        page.modal.cancel()
    page.open_edit(customer_id)
    return _render_page(page)


@customers_bp.route('/customers/modal/save', methods=['POST'])
def save_customer():
    page = get_page()
    if not page.modal.is_open:
        return redirect(_index_url(page))
    try:
        CustomerUpdate.from_mapping(request.form)
    except ValueError as exc:
        flash(f'Could not save customer: {exc}', 'danger')
        return _render_page(page, status=400)
    for field in EDITABLE_FIELDS:
        if field in request.form:
            page.modal.change(field, request.form.get(field, '').strip())
    editing = page.modal.existing is not None
    if not page.modal.save():
        return _render_page(page)
    flash('Customer updated' if editing else 'Customer added', 'success')
    return redirect(_index_url(page))


@customers_bp.route('/customers/modal/cancel', methods=['POST'])
def cancel_customer():
    page = get_page()
    if page.modal.is_open:
        page.modal.cancel()
    return redirect(_index_url(page))


@customers_bp.route('/export/excel')
def export_excel():
    page = get_page()
    rows = page.visible_rows()
    data = export_to_excel(rows)
    filename = f"customers_{datetime.now().strftime('%Y%m%d_%H%M%S')}.xlsx"
    logger.info('Exported %s customers', len(rows))
    return send_file(BytesIO(data), as_attachment=True, download_name=filename, mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet')
