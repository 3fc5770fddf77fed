"""
Login form field for MFA tokens.
"""

from collections import namedtuple

from flask_babel import lazy_gettext as _
from wtforms import Form, StringField
from wtforms.validators import Optional

from flask_mfachain.const import (
    MFA_LOGIN_FIELD_LABEL,
    MFA_LOGIN_FIELD_NAME,
    MFA_LOGIN_FIELD_PLACEHOLDER,
    MFA_LOGIN_FIELD_TYPE,
)

LoginField = namedtuple("LoginField", ["label", "name", "placeholder", "type"])

MFA_LOGIN_FIELD = LoginField(
    label=MFA_LOGIN_FIELD_LABEL,
    name=MFA_LOGIN_FIELD_NAME,
    placeholder=MFA_LOGIN_FIELD_PLACEHOLDER,
    type=MFA_LOGIN_FIELD_TYPE,
)


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class MFATokenForm(Form):
    """
    Form holding the MFA token. Can be used as a mixin
    on login forms to add the token field.
    """

    mfa_token = StringField(
        _(MFA_LOGIN_FIELD.label),
        name=MFA_LOGIN_FIELD.name,
        validators=[Optional()],
        filters=[_strip],
        render_kw={
            "placeholder": MFA_LOGIN_FIELD.placeholder,
            "type": MFA_LOGIN_FIELD.type,
            "autocomplete": "one-time-code",
        },
    )


def get_mfa_token(request) -> str:
    """Get the submitted MFA token of a request, ``""`` if none."""
    token = request.form.get(MFA_LOGIN_FIELD.name, "")
    return token.strip()
