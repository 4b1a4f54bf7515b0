class TCommonHandlers:
    """Handlers shared by every formatter bundle, whatever the schema."""

    def __init__(self, handlers, f, env):
        self.handlers = handlers
        self.f = f
        self.env = env

    def AddDefaultStartAndEndHandlers(self):
        self.handlers.Start(self.StartHandler)
        self.handlers.End(self.EndHandler)

    def StartHandler(self):
        return self.handlers.FileResult("html/start.html", {"lang": self.env.lang2})

    def EndHandler(self):
        return self.handlers.FileResult("html/end.html", {})
