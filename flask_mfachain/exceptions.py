class MFAError(Exception):
    """Base exception for MFA dispatch errors."""

    pass


class ProviderUnconfigured(MFAError):
    """
    Raised by a provider's ``configure`` when the configuration blob
    holds nothing for it. Not a failure: the provider stays inactive.
    """

    pass


class NoValidUserFound(MFAError):
    """
    Raised by a provider's ``validate_mfa`` when its method did not
    confirm the user, and by the dispatcher when no provider did.
    """

    pass


class ProviderConfigurationError(MFAError):
    """Raised when a provider fails to configure for any other reason."""

    def __init__(self, provider_id, error):
        self.provider_id = provider_id
        self.error = error
        super().__init__(
            "MFA provider {} configuration caused an error: {}".format(
                provider_id, error
            )
        )


class DuplicateProviderError(MFAError):
    """Raised when registering a provider id twice."""

    def __init__(self, provider_id):
        self.provider_id = provider_id
        super().__init__("MFA provider {} is already registered".format(provider_id))


class MFAConfigError(MFAError):
    """Malformed MFA configuration documents or sources."""

    pass
