from flask import current_app

from models import db
from repository import UnitOfWork
from services.errors import ServiceError, ProductNotFound, StorageWriteFailed
from services.image_store import ImageStore
from services.product_service import ProductService, ProductViewModel, UpsertResult, DeleteResult


def get_image_store():
    return ImageStore(current_app.config['WEB_ROOT'])


def get_product_service():
    """ProductService bound to the current request's session and web root."""
    return ProductService(UnitOfWork(db.session), get_image_store(),
                          image_dir=current_app.config['PRODUCT_IMAGE_DIR'])
