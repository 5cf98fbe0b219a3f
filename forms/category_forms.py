from flask_babel import lazy_gettext as _l
from flask_wtf import FlaskForm
from wtforms import StringField, IntegerField, SubmitField
from wtforms.validators import DataRequired, Length, NumberRange, Optional

class CategoryForm(FlaskForm):
    name = StringField(_l('Category name'), validators=[DataRequired(), Length(max=64)])
    display_order = IntegerField(_l('Display order'), validators=[Optional(), NumberRange(min=0, max=100)], default=0)
    submit = SubmitField(_l('Save'))
