"""
MFA provider interface.

A provider implements one MFA method. It is registered on an
:class:`~flask_mfachain.security.mfa.registry.MFAProviderRegistry`, configured
once from the global configuration blob and then consulted for every login
of a user that has MFA entries.
"""

from abc import ABC, abstractmethod
from typing import Any, List

from .config import MFAConfig


class MFAProvider(ABC):
    """
    Base class for MFA providers.

    Example::

        class YubikeyProvider(MFAProvider):

            def provider_id(self):
                return "yubikey"

            def configure(self, yaml_source):
                section = load_config_section(yaml_source, "yubikey")
                self.client_id = section["client_id"]

            def validate_mfa(self, response, request, user, mfa_configs):
                token = get_mfa_token(request)
                for cfg in MFAConfig.filter_for("yubikey", mfa_configs):
                    if self.check(token, cfg.attribute_string("device")):
                        return
                raise NoValidUserFound()
    """

    @abstractmethod
    def provider_id(self) -> str:
        """Unique, stable id of this provider."""
        pass

    @abstractmethod
    def configure(self, yaml_source: bytes) -> None:
        """
        Load the provider configuration from the global config blob.

        :param yaml_source: raw configuration blob
        :raises ProviderUnconfigured: if the blob holds no configuration
            for this provider
        """
        pass

    @abstractmethod
    def validate_mfa(
        self, response: Any, request: Any, user: str, mfa_configs: List[MFAConfig]
    ) -> None:
        """
        Validate the current request against the user's MFA entries.
        Returning means the user is confirmed.

        :param response: response object, may be used to send a challenge
        :param request: current request
        :param user: user name taken from the login
        :param mfa_configs: all MFA entries of the user
        :raises NoValidUserFound: if this method did not confirm the user
        """
        pass

    def __repr__(self):
        return "<{} {}>".format(self.__class__.__name__, self.provider_id())
