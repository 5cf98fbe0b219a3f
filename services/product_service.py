from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from models.product import Product
from services.errors import ProductNotFound, StorageWriteFailed

MSG_CREATED = 'Product added successfully'
MSG_UPDATED = 'Product updated successfully'
MSG_DELETED = 'Delete Successful'
MSG_DELETE_FAILED = 'Error while deleting'


@dataclass
class ProductViewModel:
    """A product plus the category options the edit form needs."""
    product: Product
    category_list: List[Tuple[int, str]] = field(default_factory=list)
    form: Optional[object] = None


@dataclass
class UpsertResult:
    created: bool = False
    product: Optional[Product] = None
    view_model: Optional[ProductViewModel] = None

    @property
    def ok(self):
        return self.view_model is None

    @property
    def message(self):
        if not self.ok:
            return None
        return MSG_CREATED if self.created else MSG_UPDATED


@dataclass
class DeleteResult:
    success: bool
    message: str

    def to_dict(self):
        return {'success': self.success, 'message': self.message}


class ProductService:
    """Creates, edits and deletes products together with their cover image.

    The database record and the image file are kept in step in this order:
    the new file is written, the record is committed, and only then is the
    replaced file removed. A failed commit rolls the session back and removes
    the file that was just written.
    """

    def __init__(self, uow, image_store, image_dir='images/product'):
        self.uow = uow
        self.image_store = image_store
        self.image_dir = image_dir

    def list_products(self):
        return self.uow.product.get_all_with_category()

    def table_rows(self):
        return [p.to_dict() for p in self.list_products()]

    def category_choices(self):
        return self.uow.category.choices()

    def prepare_for_edit(self, product_id=None):
        view_model = ProductViewModel(product=Product(), category_list=self.category_choices())
        if not product_id:
            return view_model
        product = self.uow.product.get_by_id(product_id, include=(Product.category,))
        if product is None:
            raise ProductNotFound(product_id)
        view_model.product = product
        return view_model

    def upsert(self, form, upload=None):
        """Validate ``form`` and persist it, storing ``upload`` as the new image.

        Returns an ``UpsertResult``; when validation fails nothing is written
        and the result carries a view model for re-rendering the form.
        """
        form.category_id.choices = self.category_choices()
        product_id = form.id.data or 0
        product = None
        if product_id:
            product = self.uow.product.get_by_id(product_id)
            if product is None:
                raise ProductNotFound(product_id)

        if not form.validate():
            current_app.logger.debug(f'Product form rejected: {form.errors}')
            return UpsertResult(view_model=ProductViewModel(
                product=product or Product(), category_list=form.category_id.choices, form=form))

        if product is None:
            product = Product()

        product.name = form.name.data.strip()
        product.description = form.description.data or None
        product.price = form.price.data
        product.category_id = form.category_id.data

        old_image = product.image_url
        new_image = None
        if upload:
            filename = self.image_store.generate_name(upload.filename)
            try:
                new_image = self.image_store.write(self.image_dir, filename, upload)
            except OSError as e:
                self.uow.rollback()
                current_app.logger.error(f'Failed to store image for product {product_id}: {e}', exc_info=True)
                raise StorageWriteFailed(f'Could not store image: {e}') from e
            product.image_url = new_image

        created = not product_id
        if created:
            self.uow.product.add(product)
        else:
            product = self.uow.product.update(product)

        try:
            self.uow.save()
        except SQLAlchemyError as e:
            self.uow.rollback()
            if new_image:
                self.image_store.delete_if_exists(new_image)
            current_app.logger.error(f'Failed to save product {product_id}: {e}', exc_info=True)
            raise StorageWriteFailed(f'Could not save product: {e}') from e

        if new_image and old_image and old_image != new_image:
            self.image_store.delete_if_exists(old_image)

        current_app.logger.info(
            f"Product {product.id} {'created' if created else 'updated'}"
            f"{' with new image ' + new_image if new_image else ''}")
        return UpsertResult(created=created, product=product)

    def delete(self, product_id):
        if not product_id:
            return DeleteResult(False, MSG_DELETE_FAILED)
        product = self.uow.product.get_by_id(product_id)
        if product is None:
            current_app.logger.warning(f'Delete requested for unknown product {product_id}')
            return DeleteResult(False, MSG_DELETE_FAILED)

        image = product.image_url
        self.uow.product.remove(product)
        try:
            self.uow.save()
        except SQLAlchemyError as e:
            self.uow.rollback()
            current_app.logger.error(f'Failed to delete product {product_id}: {e}', exc_info=True)
            raise StorageWriteFailed(f'Could not delete product: {e}') from e

        if image:
            self.image_store.delete_if_exists(image)
        current_app.logger.info(f'Product {product_id} deleted')
        return DeleteResult(True, MSG_DELETED)
