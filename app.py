import logging
import os
from logging.handlers import RotatingFileHandler

from flask import Flask, redirect, url_for, request, send_from_directory, render_template, has_request_context
from flask.logging import default_handler
from flask_babel import Babel
from flask_login import LoginManager, login_required, current_user
from config import Config
from models import db
from models.user import User
from services import StorageWriteFailed

# Initialize extensions
login_manager = LoginManager()
babel = Babel()

LOG_FORMAT = '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'

def configure_logging(app):
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    if app.debug:
        level = logging.DEBUG
    log_file = app.config.get('LOG_FILE')
    if log_file and not app.testing:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handler = RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5)
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    app.logger.removeHandler(default_handler)
    if not app.logger.handlers:
        app.logger.addHandler(handler)
    app.logger.setLevel(level)

def create_app(config_class=Config, **overrides):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.config.update(overrides)

    configure_logging(app)

    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    login_manager.login_message_category = 'warning'

    def get_locale():
        if not has_request_context():
            return None
        return request.accept_languages.best_match(app.config['LANGUAGES'])
    babel.init_app(app, locale_selector=get_locale)

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    # Register Blueprints
    from routes.auth import auth_bp
    app.register_blueprint(auth_bp)
    from routes.products import products_bp
    app.register_blueprint(products_bp)
    from routes.categories import categories_bp
    app.register_blueprint(categories_bp)

    @app.route("/")
    @login_required
    def dashboard():
        if current_user.is_admin():
            return redirect(url_for('products.index'))
        return render_template('dashboard.html', title='Dashboard')

    # Uploaded images live under WEB_ROOT, which need not be the static folder
    @app.route('/images/<path:filename>')
    def uploaded_image(filename):
        return send_from_directory(os.path.join(app.config['WEB_ROOT'], 'images'), filename)

    @app.errorhandler(404)
    def not_found(e):
        return render_template('errors/404.html', title='404'), 404

    @app.errorhandler(StorageWriteFailed)
    def storage_failed(e):
        app.logger.error(f'Storage failure on {request.path}: {e}')
        return render_template('errors/500.html', title='500', message=str(e)), 500

    app.logger.info(f"Bookshop admin starting; web root: {app.config['WEB_ROOT']}")
    return app

if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
