from flask import Blueprint, render_template, redirect, url_for, flash, request, jsonify, current_app
from flask_babel import gettext as _
from flask_login import login_user, logout_user, login_required, current_user
from functools import wraps
from forms.auth_forms import LoginForm
from models.user import User

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')

# Decorator restricting a view to admin accounts
def admin_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated or not current_user.is_admin():
            current_app.logger.warning(f'Admin access denied for {request.path}')
            if '/api/' in request.path:
                return jsonify({'success': False, 'message': _('Access denied')}), 403
            flash(_('You do not have permission to access this page'), 'danger')
            return redirect(url_for('dashboard'))
        return f(*args, **kwargs)
    return decorated_function

@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    if current_user.is_authenticated:
        return redirect(url_for('dashboard'))
    form = LoginForm()
    if form.validate_on_submit():
        user = User.query.filter_by(username=form.username.data).first()
        if user and user.is_active and user.check_password(form.password.data):
            login_user(user)
            current_app.logger.info(f'User {user.username} logged in')
            flash(_('Logged in successfully'), 'success')
            return redirect(url_for('dashboard'))
        flash(_('Invalid username or password'), 'danger')
    return render_template('auth/login.html', title=_('Log in'), form=form)

@auth_bp.route('/logout')
@login_required
def logout():
    logout_user()
    flash(_('Logged out successfully'), 'success')
    return redirect(url_for('auth.login'))
