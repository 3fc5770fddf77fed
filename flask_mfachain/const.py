# Extension key under app.extensions
EXTENSION_NAME = "mfachain"

# Login form field carrying the MFA token
MFA_LOGIN_FIELD_NAME = "mfa-token"
MFA_LOGIN_FIELD_LABEL = "MFA Token"
MFA_LOGIN_FIELD_PLACEHOLDER = "(optional)"
MFA_LOGIN_FIELD_TYPE = "text"

# Flask config keys
MFA_CONFIG_KEY = "MFA_CONFIG"
MFA_CONFIG_FILE_KEY = "MFA_CONFIG_FILE"
MFA_PROVIDERS_KEY = "MFA_PROVIDERS"

# Log record field holding the provider id
LOG_FIELD_MFA_PROVIDER = "mfa_provider"

LOGMSG_DEB_MFA_ACTIVATED = "Activated MFA provider %s"
LOGMSG_DEB_MFA_UNCONFIGURED = "MFA provider %s unconfigured"
LOGMSG_DEB_MFA_REGISTERED = "Registered MFA provider %s"
LOGMSG_INF_MFA_ACTIVE_COUNT = "%s of %s MFA providers active"
LOGMSG_WAR_MFA_NO_CONFIG = "No MFA configuration source set, all providers unconfigured"
