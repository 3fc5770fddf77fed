"""
Pytest fixtures for MFA dispatch tests.

Provides a Flask application and fake providers that record how
they were called.
"""

import pytest

from flask import Flask

from flask_mfachain.exceptions import NoValidUserFound
from flask_mfachain.security.mfa import (
    get_mfa_token,
    load_config_section,
    MFAConfig,
    MFAProvider,
)


class FakeProvider(MFAProvider):
    """Provider raising preset errors and recording its calls."""

    def __init__(self, provider_id, configure_error=None, validate_error=None):
        self._provider_id = provider_id
        self.configure_error = configure_error
        self.validate_error = validate_error
        self.configure_calls = []
        self.validate_calls = []

    def provider_id(self):
        return self._provider_id

    def configure(self, yaml_source):
        self.configure_calls.append(yaml_source)
        if self.configure_error is not None:
            raise self.configure_error

    def validate_mfa(self, response, request, user, mfa_configs):
        self.validate_calls.append((response, request, user, mfa_configs))
        if self.validate_error is not None:
            raise self.validate_error


class StaticTokenProvider(MFAProvider):
    """Provider accepting the token of its ``static`` config section."""

    def __init__(self):
        self.token = None

    def provider_id(self):
        return "static"

    def configure(self, yaml_source):
        self.token = load_config_section(yaml_source, "static")["token"]

    def validate_mfa(self, response, request, user, mfa_configs):
        if not MFAConfig.filter_for("static", mfa_configs):
            raise NoValidUserFound()
        if get_mfa_token(request) != self.token:
            raise NoValidUserFound()
        response.headers["X-MFA-Provider"] = self.provider_id()


@pytest.fixture
def fake_provider():
    return FakeProvider


@pytest.fixture
def static_provider():
    return StaticTokenProvider


@pytest.fixture
def app():
    """Create Flask application for testing."""
    app = Flask(__name__)
    app.config.update({
        'TESTING': True,
        'SECRET_KEY': 'test-secret-key-for-mfa',
    })
    return app

