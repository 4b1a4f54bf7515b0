class FormatterError(Exception):
    enum = "FORMATTER_ERROR"

    def __init__(self, message):
        Exception.__init__(self, message)
        self.message = message


class ConfigurationError(FormatterError):
    enum = "CONFIGURATION_ERROR"


class TemplateNotFound(ConfigurationError):
    enum = "TEMPLATE_NOT_FOUND"

    def __init__(self, name, searchPath):
        ConfigurationError.__init__(self, "Template %s not found in %s" % (repr(name), ", ".join(searchPath)))
        self.name = name
        self.searchPath = list(searchPath)


class MatcherError(FormatterError):
    enum = "MATCHER_ERROR"

    def __init__(self, message, path=None):
        FormatterError.__init__(self, message)
        self.path = path


class RenderError(FormatterError):
    enum = "RENDER_ERROR"

    def __init__(self, message, path=None):
        FormatterError.__init__(self, message)
        self.path = path
