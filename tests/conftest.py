import io

import pytest
from flask import current_app

from app import create_app
from config import TestConfig
from forms.product_forms import ProductForm
from models import db
from models.category import Category
from models.user import User, ROLE_ADMIN, ROLE_USER
from services import get_product_service

PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'\x00' * 32


@pytest.fixture
def app(tmp_path):
    app = create_app(TestConfig, WEB_ROOT=str(tmp_path / 'wwwroot'))
    with app.app_context():
        db.create_all()
        admin = User(username='admin', full_name='Admin', role=ROLE_ADMIN)
        admin.set_password('secret')
        clerk = User(username='clerk', role=ROLE_USER)
        clerk.set_password('secret')
        db.session.add_all([
            admin, clerk,
            Category(name='History', display_order=2),
            Category(name='Fiction', display_order=1),
        ])
        db.session.commit()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, username, password='secret'):
    return client.post('/auth/login', data={'username': username, 'password': password})


@pytest.fixture
def admin_client(client):
    login(client, 'admin')
    return client


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield


@pytest.fixture
def service(ctx):
    return get_product_service()


@pytest.fixture
def category_ids(ctx):
    return {c.name: c.id for c in Category.query.all()}


def submit_product(service, data, image=None):
    """Run ProductService.upsert against a multipart POST built from ``data``."""
    payload = dict(data)
    if image is not None:
        filename, content = image
        payload['image'] = (io.BytesIO(content), filename)
    with current_app.test_request_context(method='POST', data=payload):
        form = ProductForm()
        return service.upsert(form, form.image.data)
