from sqlalchemy.orm import joinedload


class Repository:
    """Data access for a single mapped entity.

    Subclasses bind ``model``; every query goes through the session handed to
    the constructor so a ``UnitOfWork`` can commit them together.
    """

    model = None

    def __init__(self, session):
        self.session = session

    def query(self):
        return self.session.query(self.model)

    def get_all(self, include=(), order_by=None):
        """Return every row, eagerly loading the given relationship attributes."""
        qry = self.query()
        for relationship in include:
            qry = qry.options(joinedload(relationship))
        qry = qry.order_by(*(order_by if order_by is not None else [self.model.id]))
        return qry.all()

    def get_by_id(self, entity_id, include=()):
        if not entity_id:
            return None
        if include:
            qry = self.query().filter(self.model.id == entity_id)
            for relationship in include:
                qry = qry.options(joinedload(relationship))
            return qry.first()
        return self.session.get(self.model, entity_id)

    def get_first(self, **filters):
        return self.query().filter_by(**filters).first()

    def count(self, **filters):
        return self.query().filter_by(**filters).count()

    def add(self, entity):
        self.session.add(entity)
        return entity

    def update(self, entity):
        # Loaded entities are already tracked; detached ones are merged back in
        if entity in self.session:
            return entity
        return self.session.merge(entity)

    def remove(self, entity):
        self.session.delete(entity)
