"""
MFA configuration entries and configuration blob helpers.

Users enroll one ``MFAConfig`` entry per MFA method, a ``provider`` id plus a
free-form ``attributes`` map. The global configuration blob is YAML; every
provider reads its own section from it with :func:`load_config_section`.

Example entries document::

    - provider: totp
      attributes:
        secret: JBSWY3DPEHPK3PXP
        digits: 6
    - provider: yubikey
      attributes:
        device: cccccckdvnek
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

import yaml

from flask_mfachain.exceptions import MFAConfigError, ProviderUnconfigured

log = logging.getLogger(__name__)


class MFAConfig(object):
    """
    One enrolled MFA method of one user.

    Attributes are untyped; use :meth:`attribute_int` and
    :meth:`attribute_string` to read them with zero value fallbacks.
    """

    __slots__ = ("provider", "attributes")

    def __init__(self, provider: str, attributes: Optional[Dict[str, Any]] = None):
        self.provider = provider
        self.attributes = dict(attributes or {})

    def attribute_int(self, key: str) -> int:
        """
        Get an integer attribute, ``0`` if absent or not an integer.
        Booleans are not accepted as integers.
        """
        value = self.attributes.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return 0

    def attribute_string(self, key: str) -> str:
        """Get a string attribute, ``""`` if absent or not a string."""
        value = self.attributes.get(key)
        if isinstance(value, str):
            return value
        return ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MFAConfig":
        if not isinstance(data, dict):
            raise MFAConfigError(
                "MFA config entry must be a mapping, got {}".format(
                    type(data).__name__
                )
            )
        provider = data.get("provider")
        if not isinstance(provider, str) or not provider:
            raise MFAConfigError("MFA config entry needs a provider string")
        attributes = data.get("attributes") or {}
        if not isinstance(attributes, dict):
            raise MFAConfigError(
                "Attributes of MFA config entry {} must be a mapping".format(provider)
            )
        return cls(provider, attributes)

    def to_dict(self) -> Dict[str, Any]:
        return {"provider": self.provider, "attributes": dict(self.attributes)}

    @staticmethod
    def filter_for(provider_id: str, mfa_configs: Iterable["MFAConfig"]) -> List["MFAConfig"]:
        """Select the entries enrolled for ``provider_id``, keeping their order."""
        return [cfg for cfg in mfa_configs if cfg.provider == provider_id]

    def __eq__(self, other):
        if not isinstance(other, MFAConfig):
            return NotImplemented
        return self.provider == other.provider and self.attributes == other.attributes

    def __repr__(self):
        return "MFAConfig(provider={!r}, attributes={!r})".format(
            self.provider, self.attributes
        )


def _safe_load(source: Union[bytes, str, None]) -> Any:
    if not source:
        return None
    try:
        return yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise MFAConfigError("Invalid MFA configuration: {}".format(e)) from e


def parse_mfa_configs(source: Union[bytes, str, None]) -> List[MFAConfig]:
    """
    Parse a YAML list of MFA config entries.

    :param source: YAML document, a list of ``provider``/``attributes`` mappings
    :return: list of MFAConfig, empty for an empty document
    :raises MFAConfigError: on invalid YAML or malformed entries
    """
    data = _safe_load(source)
    if data is None:
        return []
    if not isinstance(data, list):
        raise MFAConfigError("MFA configuration must be a list of entries")
    return [MFAConfig.from_dict(item) for item in data]


def load_config_section(yaml_source: Union[bytes, str, None], key: str) -> Dict[str, Any]:
    """
    Read the section ``key`` of the global configuration blob.

    Meant to be called from a provider's ``configure``. An empty blob or
    a missing section raises ``ProviderUnconfigured`` so the provider is
    left inactive.

    :param yaml_source: raw configuration blob
    :param key: top level key of the provider's section
    :raises ProviderUnconfigured: if there is nothing configured under key
    :raises MFAConfigError: if the blob or the section is malformed
    """
    data = _safe_load(yaml_source)
    if data is None:
        raise ProviderUnconfigured(key)
    if not isinstance(data, dict):
        raise MFAConfigError("MFA configuration blob must be a mapping")
    section = data.get(key)
    if section is None:
        raise ProviderUnconfigured(key)
    if not isinstance(section, dict):
        raise MFAConfigError("MFA configuration section {} must be a mapping".format(key))
    log.debug("Loaded MFA configuration section %s", key)
    return section
