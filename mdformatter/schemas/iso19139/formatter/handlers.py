from mdformatter.formatters.common import TCommonHandlers
from mdformatter.schemas.iso19139.formatter.functions import TIso19139Functions
from mdformatter.schemas.iso19139.formatter.matchers import TIso19139Matchers

ENTRY_TEMPLATE = "html/2-level-entry.html"


class TIso19139Handlers:
    """Default handlers for ISO19139 records.

    Simple values (text, URLs, code lists) become <dt>/<dd> pairs, responsible
    parties get their own block, and every other element with children is a
    labelled block around its children's output.
    """

    def __init__(self, handlers, f, env):
        self.handlers = handlers
        self.f = f
        self.env = env
        self.isofunc = TIso19139Functions(handlers, f, env)
        self.matchers = TIso19139Matchers(handlers, f, env)
        self.commonHandlers = TCommonHandlers(handlers, f, env)

    def AddDefaultHandlers(self):
        m = self.matchers
        self.handlers.Add(m.IsTextEl, self.IsoTextEl)
        self.handlers.Add(m.IsUrlEl, self.IsoUrlEl)
        self.handlers.Add(m.IsCodeListEl, self.IsoCodeListEl)
        self.handlers.Add(m.HasCodeListChild, self.ApplyToChild(self.IsoCodeListEl, "*"))
        self.handlers.Add(m.IsRespParty, self.RespPartyEl)
        self.handlers.Add({"select": m.IsContainerEl, "processChildren": True, "priority": -1, "needsChildData": True},
                          self.IsoEntryEl)
        self.commonHandlers.AddDefaultStartAndEndHandlers()
        self.handlers.Sort("gmd:MD_Metadata", self.SimpleEntriesFirst)

    def SimpleEntriesFirst(self, sd1, sd2):
        v1 = 1 if self.matchers.IsContainerEl(sd1.el) else -1
        v2 = 1 if self.matchers.IsContainerEl(sd2.el) else -1
        return v1 - v2

    def ApplyToChild(self, handlerFunc, name):
        def _(el):
            children = el.Children(name)
            if len(children) == 1: return handlerFunc(children[0])
            raise ValueError("Expected exactly one %s child in %s, found %d" % (name, el.name, len(children)))
        _.__qualname__ = "ApplyToChild(%s)" % handlerFunc.__name__
        return _

    def NonEmpty(self, handlerFunc):
        def _(el):
            if el is not None and el.text.strip(): return handlerFunc(el)
            return None
        return _

    def TextEntry(self, label, value):
        def _(b):
            with b.Elem("span", {"class": "md-text"}):
                b.Tag("dt", None, label)
                b.Tag("dd", None, value)
        return self.f.Html(_)

    def IsoTextEl(self, el):
        return self.TextEntry(self.f.Label(el), self.isofunc.IsoText(el))

    def IsoUrlEl(self, el):
        return self.TextEntry(self.f.Label(el), self.isofunc.IsoUrlText(el))

    def IsoCodeListEl(self, el):
        return self.TextEntry(self.f.Label(el), self.isofunc.CodeListValue(el))

    def IsoEntryEl(self, el, childData):
        if childData:
            return self.handlers.FileResult(ENTRY_TEMPLATE, {"label": self.f.Label(el), "childData": childData})
        return None

    def RespPartyEl(self, el):
        # el is the parent of gmd:CI_ResponsibleParty
        party = el.Child("gmd:CI_ResponsibleParty")
        text = self.NonEmpty(self.IsoTextEl)
        role = party.Child("gmd:role")
        roleCode = role.children[0] if role is not None and role.children else None
        contactData = [
            text(party.Child("gmd:individualName")),
            text(party.Child("gmd:organisationName")),
            text(party.Child("gmd:positionName")),
            # code lists carry their value in an attribute, not in the text
            self.IsoCodeListEl(roleCode) if roleCode is not None and self.matchers.IsCodeListEl(roleCode) else None,
            self.NonEmpty(self.ContactInfoEl)(party.Child("gmd:contactInfo")),
        ]
        contactData = [str(x) for x in contactData if x is not None]
        return self.handlers.FileResult(ENTRY_TEMPLATE, {"label": self.f.Label(el), "childData": "\n".join(contactData)})

    def ContactInfoEl(self, el):
        # el is the parent of gmd:CI_Contact
        contact = el.Child("gmd:CI_Contact")
        contactData = []
        if contact is not None:
            text = self.NonEmpty(self.IsoTextEl)
            phone = contact.Child("gmd:phone")
            phone = phone.Child("gmd:CI_Telephone") if phone is not None else None
            if phone is not None:
                for x in phone.Children("gmd:voice"): contactData.append(text(x))
                for x in phone.Children("gmd:facsimile"): contactData.append(text(x))
            address = contact.Child("gmd:address")
            address = address.Child("gmd:CI_Address") if address is not None else None
            if address is not None:
                for x in address.Children("gmd:electronicMailAddress"): contactData.append(text(x))
        contactData = [x for x in contactData if x is not None]
        return self.handlers.FileResult(ENTRY_TEMPLATE, {"label": self.f.Label(el), "childData": "\n".join(contactData)})
