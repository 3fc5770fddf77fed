"""
Tests for the ``flask mfa`` commands.
"""

from flask_mfachain.cli import mfa
from flask_mfachain.exceptions import ProviderUnconfigured
from flask_mfachain.security.mfa import MFAManager


def test_list_providers(app, fake_provider):
    app.config["MFA_CONFIG"] = "yubikey: {}\n"
    MFAManager(
        app,
        providers=[
            fake_provider("yubikey"),
            fake_provider("totp", configure_error=ProviderUnconfigured()),
        ],
    )
    runner = app.test_cli_runner()

    result = runner.invoke(mfa, ["providers"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "MFA providers"
    assert lines[2].split() == ["yubikey", "active"]
    assert lines[3].split() == ["totp", "inactive"]


def test_list_providers_not_initialized(app):
    runner = app.test_cli_runner()

    result = runner.invoke(mfa, ["providers"])

    assert result.exit_code != 0
    assert "MFAManager is not initialized" in result.output
