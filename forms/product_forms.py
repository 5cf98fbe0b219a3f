from flask_babel import lazy_gettext as _l
from flask_wtf import FlaskForm
from flask_wtf.file import FileField, FileAllowed
from wtforms import StringField, SelectField, IntegerField, FloatField, TextAreaField, SubmitField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange, Optional
from wtforms.widgets import HiddenInput

IMAGE_EXTENSIONS = ['jpg', 'jpeg', 'png', 'gif', 'webp']

class ProductForm(FlaskForm):
    id = IntegerField(widget=HiddenInput(), validators=[Optional()], default=0)
    name = StringField(_l('Name'), validators=[DataRequired(), Length(max=128)])
    description = TextAreaField(_l('Description'), validators=[Optional()])
    price = FloatField(_l('Price'), validators=[InputRequired(), NumberRange(min=0)])
    category_id = SelectField(_l('Category'), coerce=int, validators=[InputRequired()])
    image = FileField(_l('Image'), validators=[FileAllowed(IMAGE_EXTENSIONS, _l('Images only!'))])
    submit = SubmitField(_l('Save'))
