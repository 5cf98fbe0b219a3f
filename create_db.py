import os

from app import create_app
from models import db
from models.user import User, ROLE_ADMIN
from models.category import Category

DEFAULT_CATEGORIES = ['Action', 'Science Fiction', 'History']

def create_database(reset=False):
    app = create_app()
    with app.app_context():
        if reset:
            db.drop_all()
            print("Dropped existing tables")
        db.create_all()
        print("Database tables created")

        if not User.query.filter_by(username='admin').first():
            admin_user = User(username='admin', full_name='Administrator', role=ROLE_ADMIN)
            admin_user.set_password(os.environ.get('ADMIN_PASSWORD', 'admin123'))
            db.session.add(admin_user)
            print("Created default admin account (username: admin)")

        for order, name in enumerate(DEFAULT_CATEGORIES, start=1):
            if not Category.query.filter_by(name=name).first():
                db.session.add(Category(name=name, display_order=order))

        db.session.commit()
        os.makedirs(os.path.join(app.config['WEB_ROOT'], app.config['PRODUCT_IMAGE_DIR']), exist_ok=True)
        print("Default data added")

if __name__ == '__main__':
    create_database(reset=os.environ.get('RESET_DB', '').lower() in ('1', 'true', 'yes'))
