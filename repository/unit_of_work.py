from models.user import User
from repository.base import Repository
from repository.category_repository import CategoryRepository
from repository.product_repository import ProductRepository


class UserRepository(Repository):
    model = User


class UnitOfWork:
    """Groups the repositories that share one session; ``save`` is the commit point."""

    def __init__(self, session):
        self.session = session
        self.product = ProductRepository(session)
        self.category = CategoryRepository(session)
        self.user = UserRepository(session)

    def save(self):
        self.session.commit()

    def rollback(self):
        self.session.rollback()
