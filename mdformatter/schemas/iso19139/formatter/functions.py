from mdformatter.schemas.iso19139.formatter.matchers import SIMPLE_VALUE_CHILDREN

BBOX_SIDES = ("gmd:westBoundLongitude", "gmd:eastBoundLongitude", "gmd:southBoundLatitude", "gmd:northBoundLatitude")


class TIso19139Functions:

    def __init__(self, handlers, f, env):
        self.handlers = handlers
        self.f = f
        self.env = env

    def IsoText(self, el):
        """Text of 'el' in the UI language.

        Tries, in order: the gmd:LocalisedCharacterString whose locale is
        #<UI lang2 in upper case>, the gco:CharacterString (the untranslated
        default), the first localised string of any language, and "".
        """
        if el is None: return ""
        uiCode = "#%s" % self.env.lang2.upper()
        locStrings = el.Descendants("gmd:LocalisedCharacterString")
        for loc in locStrings:
            if loc.Attr("locale") == uiCode: return loc.text
        default = el.Child("gco:CharacterString")
        if default is not None: return default.text
        for name in SIMPLE_VALUE_CHILDREN:
            value = el.Child(name)
            if value is not None: return value.text
        if locStrings: return locStrings[0].text
        return ""

    def IsoUrlText(self, el):
        if el is None: return ""
        return el.TextOf("gmd:URL").strip()

    def CodeListValue(self, el):
        if el is None: return ""
        return el.Attr("codeListValue", "")

    def HandleExtent(self, el):
        # el is a gmd:geographicElement
        bbox = el.Child("gmd:EX_GeographicBoundingBox")
        if bbox is None: return None
        def _(b):
            with b.Elem("div", {"class": "md-extent"}):
                b.Tag("h3", None, self.f.NodeLabel(el))
                with b.Elem("dl", {"class": "md-bbox"}):
                    for side in BBOX_SIDES:
                        value = bbox.Child(side)
                        if value is None: continue
                        b.Tag("dt", None, self.f.NodeLabel(side))
                        b.Tag("dd", None, self.IsoText(value).strip())
        return self.f.Html(_)
