class ServiceError(Exception):
    """Base class for errors raised by the service layer."""


class ProductNotFound(ServiceError):
    def __init__(self, product_id):
        super().__init__(f'Product {product_id} not found')
        self.product_id = product_id


class StorageWriteFailed(ServiceError):
    """A file or database write could not be completed."""
