class HbHelpersError(Exception):
    # base exception for all application-specific errors.
    pass

class ConfigError(HbHelpersError):
    # errors related to configuration.
    pass

class ContextError(HbHelpersError):
    # errors while loading template context data.
    pass

class TemplateError(HbHelpersError):
    # errors related to template compilation or rendering.
    pass

class OutputError(HbHelpersError):
    # errors during output operations.
    pass

class HelperUsageError(HbHelpersError):
    # a helper was invoked with arguments it cannot work with.
    pass

class ValidationError(HelperUsageError):
    # a helper argument failed validation (bad url, bad storage key, ...).
    pass
