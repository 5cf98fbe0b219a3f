from .base import Repository
from .product_repository import ProductRepository
from .category_repository import CategoryRepository
from .unit_of_work import UnitOfWork
