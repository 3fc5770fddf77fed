"""
MFA provider registry, activation and validation dispatch.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Any, List, Tuple

from flask_mfachain.const import (
    LOG_FIELD_MFA_PROVIDER,
    LOGMSG_DEB_MFA_ACTIVATED,
    LOGMSG_DEB_MFA_REGISTERED,
    LOGMSG_DEB_MFA_UNCONFIGURED,
)
from flask_mfachain.exceptions import (
    DuplicateProviderError,
    NoValidUserFound,
    ProviderConfigurationError,
    ProviderUnconfigured,
)

from .config import MFAConfig
from .providers import MFAProvider

log = logging.getLogger(__name__)


class ReadWriteLock(object):
    """
    Many readers or one writer. Writers are not reentrant.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False

    @contextmanager
    def read(self):
        with self._cond:
            while self._writer:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            while self._writer or self._readers:
                self._cond.wait()
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class MFAProviderRegistry(object):
    """
    Holds the registered MFA providers and the active subset of them.

    Providers are registered at startup, activated once with
    :meth:`initialize` and then consulted, in registration order,
    by :meth:`validate_mfa`.
    """

    def __init__(self):
        self._lock = ReadWriteLock()
        self._registered = []
        self._active = []

    @property
    def registered_providers(self) -> Tuple[MFAProvider, ...]:
        with self._lock.read():
            return tuple(self._registered)

    @property
    def active_providers(self) -> Tuple[MFAProvider, ...]:
        with self._lock.read():
            return tuple(self._active)

    def register(self, provider: MFAProvider) -> MFAProvider:
        """
        Register a provider. Can be used as a class decorator on a
        provider class with a no argument constructor.

        :raises DuplicateProviderError: if the provider id is taken
        """
        if isinstance(provider, type):
            self.register(provider())
            return provider
        provider_id = provider.provider_id()
        with self._lock.write():
            if any(p.provider_id() == provider_id for p in self._registered):
                raise DuplicateProviderError(provider_id)
            self._registered.append(provider)
        log.debug(
            LOGMSG_DEB_MFA_REGISTERED,
            provider_id,
            extra={LOG_FIELD_MFA_PROVIDER: provider_id},
        )
        return provider

    def initialize(self, yaml_source: bytes) -> None:
        """
        Configure every registered provider from the configuration blob
        and activate those that configured successfully.

        Stops at the first provider failing with anything other than
        ``ProviderUnconfigured``; providers activated before it stay active.

        :param yaml_source: raw configuration blob, passed to every provider
        :raises ProviderConfigurationError: wrapping the failing provider's error
        """
        with self._lock.write():
            for provider in self._registered:
                provider_id = provider.provider_id()
                try:
                    provider.configure(yaml_source)
                except ProviderUnconfigured:
                    log.debug(
                        LOGMSG_DEB_MFA_UNCONFIGURED,
                        provider_id,
                        extra={LOG_FIELD_MFA_PROVIDER: provider_id},
                    )
                    continue
                except Exception as e:
                    raise ProviderConfigurationError(provider_id, e) from e
                self._active.append(provider)
                log.debug(
                    LOGMSG_DEB_MFA_ACTIVATED,
                    provider_id,
                    extra={LOG_FIELD_MFA_PROVIDER: provider_id},
                )

    def validate_mfa(
        self, response: Any, request: Any, user: str, mfa_configs: List[MFAConfig]
    ) -> None:
        """
        Validate a login against the user's MFA entries.

        A user without entries passes. Otherwise the active providers are
        tried in order until one confirms the user; a provider raising
        ``NoValidUserFound`` hands over to the next one, any other
        exception propagates unchanged.

        :raises NoValidUserFound: if no active provider confirmed the user
        """
        if not mfa_configs:
            return
        with self._lock.read():
            providers = list(self._active)
        for provider in providers:
            try:
                provider.validate_mfa(response, request, user, mfa_configs)
            except NoValidUserFound:
                continue
            return
        raise NoValidUserFound(
            "No MFA provider could validate user {}".format(user)
        )
