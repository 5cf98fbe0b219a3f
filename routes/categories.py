from flask import Blueprint, render_template, redirect, url_for, flash, abort, current_app
from flask_babel import gettext as _
from flask_login import login_required
from forms.category_forms import CategoryForm
from models import db
from models.category import Category
from repository import UnitOfWork
from routes.auth import admin_required

categories_bp = Blueprint('categories', __name__, url_prefix='/categories')

@categories_bp.route('/')
@login_required
@admin_required
def list_categories():
    categories = UnitOfWork(db.session).category.get_ordered()
    return render_template('categories/list.html', title=_('Categories'), categories=categories)

@categories_bp.route('/add', methods=['GET', 'POST'])
@login_required
@admin_required
def add_category():
    uow = UnitOfWork(db.session)
    form = CategoryForm()
    if form.validate_on_submit():
        if uow.category.name_taken(form.name.data):
            flash(_('Category name is already in use'), 'danger')
        else:
            category = Category(name=form.name.data.strip(), display_order=form.display_order.data or 0)
            uow.category.add(category)
            uow.save()
            current_app.logger.info(f'Category {category.id} created')
            flash(_('Category added successfully'), 'success')
            return redirect(url_for('categories.list_categories'))
    return render_template('categories/form.html', title=_('Add category'), form=form)

@categories_bp.route('/edit/<int:category_id>', methods=['GET', 'POST'])
@login_required
@admin_required
def edit_category(category_id):
    uow = UnitOfWork(db.session)
    category = uow.category.get_by_id(category_id)
    if category is None:
        abort(404)
    form = CategoryForm(obj=category)
    if form.validate_on_submit():
        if uow.category.name_taken(form.name.data, exclude_id=category.id):
            flash(_('Category name is already in use'), 'danger')
        else:
            category.name = form.name.data.strip()
            category.display_order = form.display_order.data or 0
            uow.category.update(category)
            uow.save()
            flash(_('Category updated successfully'), 'success')
            return redirect(url_for('categories.list_categories'))
    return render_template('categories/form.html', title=_('Edit category'), form=form, edit=True)

@categories_bp.route('/delete/<int:category_id>', methods=['POST'])
@login_required
@admin_required
def delete_category(category_id):
    uow = UnitOfWork(db.session)
    category = uow.category.get_by_id(category_id)
    if category is None:
        abort(404)

    if uow.product.exists_in_category(category_id):
        flash(_('Cannot delete a category that still has products'), 'danger')
    else:
        uow.category.remove(category)
        uow.save()
        current_app.logger.info(f'Category {category_id} deleted')
        flash(_('Category deleted successfully'), 'success')

    return redirect(url_for('categories.list_categories'))
