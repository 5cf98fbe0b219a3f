from models import db

# Product category, offered as a select option on the product form
class Category(db.Model):
    __tablename__ = 'categories'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(64), unique=True, nullable=False)
    display_order = db.Column(db.Integer, nullable=False, default=0)

    products = db.relationship('Product', back_populates='category')

    def to_dict(self):
        return {'id': self.id, 'name': self.name, 'display_order': self.display_order}

    def __repr__(self):
        return f'<Category {self.id} {self.name!r}>'
