"""Exception definitions for the CMS config service"""


class CmsConfigException(Exception):
    """Base exception for all cmsconfig errors.

    Builders never raise; these cover the ambient layer around them
    (settings loading, CLI).
    """

    pass


class ConfigException(CmsConfigException):
    """Raised when settings loading or validation fails.

    Use this exception when:
    - The settings file cannot be found
    - The TOML syntax is invalid
    - Settings validation fails (invalid values, unknown types)
    """

    pass
