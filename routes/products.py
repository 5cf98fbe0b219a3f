from flask import Blueprint, render_template, redirect, url_for, flash, request, jsonify, abort
from flask_babel import gettext as _
from flask_login import login_required
from forms.product_forms import ProductForm
from routes.auth import admin_required
from services import get_product_service, ProductNotFound

products_bp = Blueprint('products', __name__, url_prefix='/products')

@products_bp.route('/')
@login_required
@admin_required
def index():
    products = get_product_service().list_products()
    return render_template('products/index.html', title=_('Products'), products=products)

@products_bp.route('/upsert', methods=['GET', 'POST'])
@products_bp.route('/upsert/<int:product_id>', methods=['GET', 'POST'])
@login_required
@admin_required
def upsert(product_id=None):
    service = get_product_service()
    if request.method == 'POST':
        form = ProductForm()
        if product_id:
            form.id.data = product_id
        try:
            result = service.upsert(form, form.image.data)
        except ProductNotFound:
            abort(404)
        if result.ok:
            flash(_(result.message), 'success')
            return redirect(url_for('products.index'))
        view_model = result.view_model
    else:
        try:
            view_model = service.prepare_for_edit(product_id)
        except ProductNotFound:
            abort(404)
        form = ProductForm(obj=view_model.product)
        form.category_id.choices = view_model.category_list
    title = _('Create product') if not form.id.data else _('Edit product')
    return render_template('products/upsert.html', title=title, form=form,
                           product=view_model.product)

@products_bp.route('/api/list', methods=['GET'])
@login_required
@admin_required
def api_list_products():
    return jsonify({'data': get_product_service().table_rows()})

@products_bp.route('/api/delete', methods=['DELETE'])
@products_bp.route('/api/delete/<int:product_id>', methods=['DELETE'])
@login_required
@admin_required
def api_delete_product(product_id=None):
    result = get_product_service().delete(product_id)
    return jsonify(result.to_dict())
