"""
Flask integration for the MFA provider registry.

Usage::

    mfa = MFAManager(providers=[YubikeyProvider()])
    mfa.init_app(app)

    @app.route("/login", methods=["POST"])
    def login():
        response = make_response()
        try:
            mfa.validate(response, username, user_mfa_configs)
        except NoValidUserFound:
            ...
"""

import logging
from typing import Any, Iterable, List, Optional

from flask import current_app, Flask, request
from werkzeug.utils import import_string

from flask_mfachain.const import (
    EXTENSION_NAME,
    LOGMSG_INF_MFA_ACTIVE_COUNT,
    LOGMSG_WAR_MFA_NO_CONFIG,
    MFA_CONFIG_FILE_KEY,
    MFA_CONFIG_KEY,
    MFA_PROVIDERS_KEY,
)
from flask_mfachain.exceptions import MFAConfigError

from .config import MFAConfig
from .providers import MFAProvider
from .registry import MFAProviderRegistry

log = logging.getLogger(__name__)


class MFAManager(object):
    """
    Flask extension owning an :class:`MFAProviderRegistry`.

    Providers given to the constructor, registered with
    :meth:`register_provider` or listed in ``MFA_PROVIDERS`` are
    activated by :meth:`init_app` with the configuration blob taken from
    ``MFA_CONFIG`` or the file named by ``MFA_CONFIG_FILE``.
    """

    def __init__(
        self,
        app: Optional[Flask] = None,
        providers: Optional[Iterable[MFAProvider]] = None,
        registry: Optional[MFAProviderRegistry] = None,
    ):
        self.registry = registry if registry is not None else MFAProviderRegistry()
        self._activated = False
        for provider in providers or []:
            self.registry.register(provider)
        if app is not None:
            self.init_app(app)

    def register_provider(self, provider: MFAProvider) -> MFAProvider:
        return self.registry.register(provider)

    def init_app(self, app: Flask) -> None:
        """
        Attach the extension to ``app``. Providers are activated with the
        configuration of the first app only; later apps share them.
        """
        app.config.setdefault(MFA_CONFIG_KEY, None)
        app.config.setdefault(MFA_CONFIG_FILE_KEY, None)
        app.config.setdefault(MFA_PROVIDERS_KEY, [])

        if not self._activated:
            for provider in self._load_providers(app.config[MFA_PROVIDERS_KEY]):
                self.registry.register(provider)

            self.registry.initialize(self._read_config_source(app))
            self._activated = True
            log.info(
                LOGMSG_INF_MFA_ACTIVE_COUNT,
                len(self.registry.active_providers),
                len(self.registry.registered_providers),
            )
        app.extensions[EXTENSION_NAME] = self

    @staticmethod
    def _load_providers(provider_refs: Iterable[Any]) -> List[MFAProvider]:
        providers = []
        for ref in provider_refs:
            if isinstance(ref, str):
                ref = import_string(ref)
            if isinstance(ref, type):
                ref = ref()
            if not isinstance(ref, MFAProvider):
                raise MFAConfigError(
                    "{} is not an MFA provider".format(ref.__class__.__name__)
                )
            providers.append(ref)
        return providers

    @staticmethod
    def _read_config_source(app: Flask) -> bytes:
        source = app.config[MFA_CONFIG_KEY]
        if source is not None:
            if isinstance(source, str):
                return source.encode("utf-8")
            if isinstance(source, (bytes, bytearray)):
                return bytes(source)
            raise MFAConfigError(
                "{} must be str or bytes, got {}".format(
                    MFA_CONFIG_KEY, type(source).__name__
                )
            )
        path = app.config[MFA_CONFIG_FILE_KEY]
        if path:
            try:
                with open(path, "rb") as f:
                    return f.read()
            except OSError as e:
                raise MFAConfigError(
                    "Unable to read MFA configuration file {}: {}".format(path, e)
                ) from e
        log.warning(LOGMSG_WAR_MFA_NO_CONFIG)
        return b""

    def validate(self, response: Any, user: str, mfa_configs: List[MFAConfig]) -> None:
        """
        Validate the current request against the user's MFA entries.

        :raises NoValidUserFound: if no active provider confirmed the user
        """
        self.registry.validate_mfa(
            response, request._get_current_object(), user, mfa_configs
        )


def get_mfa_manager(app: Optional[Flask] = None) -> MFAManager:
    """
    Get the MFAManager of ``app`` or of the current app.

    :raises RuntimeError: if the extension is not initialized
    """
    app = app or current_app
    try:
        return app.extensions[EXTENSION_NAME]
    except KeyError:
        raise RuntimeError("MFAManager is not initialized on this app") from None
