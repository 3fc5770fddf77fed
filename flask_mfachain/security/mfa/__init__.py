"""
Pluggable Multi-Factor Authentication dispatch.

MFA methods are implemented as providers registered on a registry. At
startup every registered provider configures itself from the global
configuration blob; those left unconfigured are skipped. On login the
active providers are tried in registration order until one confirms
the user.

Example Usage:
    from flask_mfachain.security.mfa import MFAManager

    mfa = MFAManager(providers=[YubikeyProvider(), TOTPProvider()])
    mfa.init_app(app)

Components:
    - config: user MFA entries and configuration blob helpers
    - providers: provider interface
    - registry: registration, activation and validation dispatch
    - manager: Flask extension
    - forms: MFA token login field
"""

from .config import load_config_section, MFAConfig, parse_mfa_configs
from .forms import get_mfa_token, LoginField, MFA_LOGIN_FIELD, MFATokenForm
from .manager import get_mfa_manager, MFAManager
from .providers import MFAProvider
from .registry import MFAProviderRegistry, ReadWriteLock

__all__ = [
    # Config
    "MFAConfig",
    "parse_mfa_configs",
    "load_config_section",
    # Providers
    "MFAProvider",
    "MFAProviderRegistry",
    "ReadWriteLock",
    # Integration
    "MFAManager",
    "get_mfa_manager",
    # Forms
    "LoginField",
    "MFA_LOGIN_FIELD",
    "MFATokenForm",
    "get_mfa_token",
]
