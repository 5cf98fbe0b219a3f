from sqlalchemy import func

from models.category import Category
from repository.base import Repository


class CategoryRepository(Repository):
    model = Category

    def get_ordered(self):
        return self.get_all(order_by=[Category.display_order, Category.name])

    def name_taken(self, name, exclude_id=None):
        qry = self.query().filter(func.lower(Category.name) == name.strip().lower())
        if exclude_id:
            qry = qry.filter(Category.id != exclude_id)
        return qry.first() is not None

    def choices(self):
        """(id, name) pairs for a WTForms SelectField."""
        return [(c.id, c.name) for c in self.get_ordered()]
