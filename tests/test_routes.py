import re


def row_ids(response):
    return [int(v) for v in re.findall(r'data-customer-id="(\d+)"', response.get_data(as_text=True))]


def test_health_ok(client):
    r = client.get('/health')
    assert r.status_code == 200
    assert r.json['ok'] is True


def test_index_lists_customers(client):
    r = client.get('/')
    body = r.get_data(as_text=True)
    assert r.status_code == 200
    assert row_ids(r) == [0, 1, 2, 3]
    assert '05/03/2024' in body
    assert 'modal-title' not in body


def test_search_filters_rows(client):
    r = client.get('/?search=BAKER')
    assert row_ids(r) == [1]


def test_sort_toggle_cycles(client):
    carets = []
    for _ in range(3):
        r = client.post('/sort/name', follow_redirects=True)
        match = re.search(r'data-sort-caret="([\w-]+)"', r.get_data(as_text=True))
        carets.append(match.group(1))
    assert carets == ['fa-sort-asc', 'fa-sort-desc', 'fa-sort']


def test_sort_descending_by_date(client):
    client.post('/sort/date_added')
    r = client.post('/sort/date_added', follow_redirects=True)
    assert row_ids(r) == [0, 2, 1, 3]


def test_sort_unknown_column(client):
    assert client.post('/sort/email').status_code == 404


def test_create_flow(client, page):
    r = client.get('/customers/new')
    body = r.get_data(as_text=True)
    assert 'Create Customer' in body
    assert re.search(r'id="save-customer"\s+disabled', body)

    r = client.post('/customers/modal/save', data={'name': 'Acme', 'contact': 'Widget', 'phone': '555-123-4567'})
    assert r.status_code == 302
    assert page.customers[0].name == 'Acme'
    assert page.customers[0].customer_id == 5
    assert not page.modal.is_open


def test_invalid_save_keeps_modal_open(client, page):
    client.get('/customers/new')
    r = client.post('/customers/modal/save', data={'name': 'Acme', 'contact': '', 'phone': '555'})
    assert r.status_code == 200
    assert page.modal.is_open
    assert len(page.customers) == 4
    assert 'alert-danger' not in r.get_data(as_text=True)


def test_whitespace_only_field_counts_as_empty(client, page):
    client.get('/customers/new')
    r = client.post('/customers/modal/save', data={'name': '   ', 'contact': 'Widget', 'phone': '555'})
    body = r.get_data(as_text=True)

    assert r.status_code == 200
    assert page.modal.is_open
    assert len(page.customers) == 4
    assert re.search(r'id="save-customer"\s+disabled', body)
    assert "value.trim() !== ''" in body


def test_unknown_field_is_rejected(client, page):
    client.get('/customers/new')
    r = client.post('/customers/modal/save', data={'name': 'A', 'contact': 'B', 'phone': 'C', 'email': 'x'})
    assert r.status_code == 400
    assert page.modal.is_open
    assert len(page.customers) == 4


def test_edit_flow(client, page):
    r = client.get('/customers/2/edit')
    body = r.get_data(as_text=True)
    assert 'Edit Customer' in body
    assert 'value="Quigley Group"' in body

    client.post('/customers/modal/save', data={'name': 'Quigley Holdings', 'contact': 'Generic Wooden Table', 'phone': '555-201-0003'})
    assert page.find(2).name == 'Quigley Holdings'
    assert len(page.customers) == 4


def test_edit_unknown_customer(client):
    assert client.get('/customers/99/edit').status_code == 404


def test_cancel_discards_changes(client, page):
    before = list(page.customers)
    client.get('/customers/1/edit')
    r = client.post('/customers/modal/cancel', data={'name': 'Nope'})
    assert r.status_code == 302
    assert page.customers == before
    assert not page.modal.is_open
    assert page.edit_customer is None


def test_export_excel(client):
    client.get('/?search=abbott')
    r = client.get('/export/excel')
    assert r.status_code == 200
    assert r.mimetype == 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    assert r.data[:2] == b'PK'
