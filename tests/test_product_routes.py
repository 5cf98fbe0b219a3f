import io

from models import db
from models.category import Category
from models.product import Product
from tests.conftest import PNG_BYTES, login


def fiction_id(app):
    with app.app_context():
        return Category.query.filter_by(name='Fiction').first().id


def create_product(client, app, **fields):
    data = {'name': 'Dune', 'description': 'Desert planet', 'price': '12.50', 'category_id': str(fiction_id(app))}
    data.update(fields)
    return client.post('/products/upsert', data=data, content_type='multipart/form-data')


def product_ids(app):
    with app.app_context():
        return [p.id for p in Product.query.order_by(Product.id)]


def test_anonymous_user_is_sent_to_login(client):
    response = client.get('/products/')
    assert response.status_code == 302
    assert '/auth/login' in response.headers['Location']


def test_non_admin_is_redirected(client):
    login(client, 'clerk')
    response = client.get('/products/')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/')


def test_non_admin_gets_json_403_on_api(client):
    login(client, 'clerk')
    response = client.delete('/products/api/delete/1')
    assert response.status_code == 403
    assert response.get_json()['success'] is False


def test_index_lists_products(admin_client, app):
    create_product(admin_client, app)
    response = admin_client.get('/products/')
    assert response.status_code == 200
    assert b'Dune' in response.data
    assert b'Fiction' in response.data


def test_create_form_renders_categories(admin_client):
    response = admin_client.get('/products/upsert')
    assert response.status_code == 200
    assert b'Fiction' in response.data
    assert b'History' in response.data


def test_edit_form_unknown_product_is_404(admin_client):
    assert admin_client.get('/products/upsert/999').status_code == 404


def test_create_redirects_with_flash(admin_client, app):
    response = create_product(admin_client, app)
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/products/')

    page = admin_client.get('/products/')
    assert b'Product added successfully' in page.data
    # One-shot message
    assert b'Product added successfully' not in admin_client.get('/products/').data


def test_invalid_submission_rerenders_form(admin_client, app):
    response = create_product(admin_client, app, name='', price='-3')
    assert response.status_code == 200
    assert b'Desert planet' in response.data
    assert b'is-invalid' in response.data
    assert product_ids(app) == []


def test_update_with_image_and_serve_it(admin_client, app):
    create_product(admin_client, app)
    product_id = product_ids(app)[0]

    response = admin_client.post(
        f'/products/upsert/{product_id}',
        data={'id': str(product_id), 'name': 'Dune', 'price': '15', 'category_id': str(fiction_id(app)),
              'image': (io.BytesIO(PNG_BYTES), 'cover.png')},
        content_type='multipart/form-data')
    assert response.status_code == 302
    assert b'Product updated successfully' in admin_client.get('/products/').data

    with app.app_context():
        image_url = db.session.get(Product, product_id).image_url
    assert image_url.startswith('/images/product/')
    served = admin_client.get(image_url)
    assert served.status_code == 200
    assert served.data == PNG_BYTES
    served.close()

    edit_page = admin_client.get(f'/products/upsert/{product_id}')
    assert image_url.encode() in edit_page.data


def test_api_list_returns_data_rows(admin_client, app):
    create_product(admin_client, app)
    response = admin_client.get('/products/api/list')
    assert response.status_code == 200
    rows = response.get_json()['data']
    assert len(rows) == 1
    assert rows[0]['name'] == 'Dune'
    assert rows[0]['category']['name'] == 'Fiction'


def test_api_delete(admin_client, app):
    create_product(admin_client, app)
    product_id = product_ids(app)[0]

    response = admin_client.delete(f'/products/api/delete/{product_id}')
    assert response.get_json() == {'success': True, 'message': 'Delete Successful'}
    assert product_ids(app) == []

    again = admin_client.delete(f'/products/api/delete/{product_id}')
    assert again.get_json() == {'success': False, 'message': 'Error while deleting'}


def test_api_delete_without_id(admin_client):
    response = admin_client.delete('/products/api/delete')
    assert response.get_json()['success'] is False


def test_update_url_id_wins_over_form_id(admin_client, app):
    create_product(admin_client, app, name='A')
    create_product(admin_client, app, name='B')
    first_id, second_id = product_ids(app)

    response = admin_client.post(
        f'/products/upsert/{first_id}',
        data={'id': str(second_id), 'name': 'EDITED', 'price': '10', 'category_id': str(fiction_id(app))},
        content_type='multipart/form-data')
    assert response.status_code == 302

    with app.app_context():
        names = [(p.id, p.name) for p in Product.query.order_by(Product.id)]
    assert names == [(first_id, 'EDITED'), (second_id, 'B')]


def test_invalid_update_of_unknown_product_is_404(admin_client, app):
    response = admin_client.post('/products/upsert/999', data={'name': '', 'price': '-1'},
                                 content_type='multipart/form-data')
    assert response.status_code == 404
