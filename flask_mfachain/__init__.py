__author__ = "Flask-MFAChain contributors"
__version__ = "1.0.0"

from .exceptions import (  # noqa: F401
    DuplicateProviderError,
    MFAConfigError,
    MFAError,
    NoValidUserFound,
    ProviderConfigurationError,
    ProviderUnconfigured,
)
from .security.mfa import (  # noqa: F401
    MFA_LOGIN_FIELD,
    MFAConfig,
    MFAManager,
    MFAProvider,
    MFAProviderRegistry,
    MFATokenForm,
    get_mfa_manager,
)

__all__ = [
    "MFAConfig",
    "MFAManager",
    "MFAProvider",
    "MFAProviderRegistry",
    "MFATokenForm",
    "MFA_LOGIN_FIELD",
    "get_mfa_manager",
    "MFAError",
    "ProviderUnconfigured",
    "NoValidUserFound",
    "ProviderConfigurationError",
    "DuplicateProviderError",
    "MFAConfigError",
]
