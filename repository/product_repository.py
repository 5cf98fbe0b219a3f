from models.product import Product
from repository.base import Repository


class ProductRepository(Repository):
    model = Product

    def get_all_with_category(self):
        return self.get_all(include=(Product.category,))

    def exists_in_category(self, category_id):
        return self.count(category_id=category_id) > 0
