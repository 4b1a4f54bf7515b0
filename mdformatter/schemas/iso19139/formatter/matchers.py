TEXT_CHILDREN = ("gco:CharacterString", "gmd:PT_FreeText")
SIMPLE_VALUE_CHILDREN = ("gco:Date", "gco:DateTime", "gco:Decimal", "gco:Integer", "gco:Real", "gco:Boolean", "gco:Distance")


class TIso19139Matchers:
    """Element classes of ISO19139 records, used to select the default handlers."""

    def __init__(self, handlers, f, env):
        self.handlers = handlers
        self.f = f
        self.env = env

    def IsTextEl(self, el):
        return any(child.name in TEXT_CHILDREN or child.name in SIMPLE_VALUE_CHILDREN for child in el.children)

    def IsUrlEl(self, el):
        return el.Child("gmd:URL") is not None

    def IsCodeListEl(self, el):
        return "codeListValue" in el.attributes

    def HasCodeListChild(self, el):
        children = el.children
        return len(children) == 1 and self.IsCodeListEl(children[0])

    def IsRespParty(self, el):
        return el.Child("gmd:CI_ResponsibleParty") is not None

    def IsContainerEl(self, el):
        if not el.children: return False
        return not (self.IsTextEl(el) or self.IsUrlEl(el) or self.IsCodeListEl(el) or self.HasCodeListChild(el))
