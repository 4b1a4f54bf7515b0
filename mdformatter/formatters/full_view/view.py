"""
A view.py script configures the 'handlers' object
(mdformatter.modules.formatter.handlers.THandlers).  The script has the
following variables bound before execution:

- handlers - the THandlers object the rules are registered with
- f - a TFunctions object (labels, the Html builder, language codes)
- env - a TEnvironment object.  *IMPORTANT* env can only be used while a
        record is rendered.  The script itself runs once, when the formatter
        is compiled; the compiled formatter is cached and reused.
"""
import re

from mdformatter.formatters.shared import shared_text
from mdformatter.schemas.iso19139.formatter.functions import TIso19139Functions

isofunc = TIso19139Functions(handlers, f, env)


# handlers.Roots selects the elements where the recursive processing starts.
# Without roots the root element of the record is the only root.  Selectors
# are XPath expressions evaluated from the root element; Roots replaces the
# current roots, Root adds one.
handlers.Roots('gmd:distributionInfo//gmd:onLine[1]', 'gmd:identificationInfo/*', 'gmd:referenceSystemInfo')


# Roots can also be a function, called once at the start of every render,
# when the roots depend on the request.
def select_roots(env):
    if env.ParamBool('brief'):
        return ['gmd:distributionInfo//gmd:onLine[1]']
    return ['gmd:distributionInfo//gmd:onLine[1]', 'gmd:identificationInfo/*', 'gmd:referenceSystemInfo']

handlers.Roots(select_roots)

handlers.Root('gmd:dataQualityInfo')


# Exact element names are the fastest matchers and have priority 1; all other
# matchers default to 0.  Higher priorities are tried first, then the order of
# registration.  A handler receives the node; with needsChildData=True it also
# receives the output of its children (or "" if processChildren is False).
@handlers.Add('gmd:abstract')
def abstract(el):
    return f.Html(lambda b: (
        b.Open('p', {'class': 'abstract'}),
        b.Tag('span', {'class': 'label'}, f.NodeLabel('gmd:abstract')),
        b.Tag('span', {'class': 'value'}, isofunc.IsoText(el)),
        b.Close()))


# One start and one end function; registering again replaces the previous one.
handlers.Start(lambda: '<html>\n<body>\n')
handlers.End(lambda: '</body>\n</html>\n')


# A compiled regular expression matches the whole element name.
@handlers.Add(re.compile(r'...:title'))
def title(el):
    return f.Html(lambda b: (
        b.Open('p', {'class': 'title'}),
        b.Tag('span', {'class': 'label'}, f.NodeLabel(el)),
        b.Tag('span', {'class': 'value'}, isofunc.IsoText(el)),
        b.Close()))


# Paths join element names with '>' from the root element of the record.
handlers.WithPath(r'[^>]+>gmd:identificationInfo>.+extent>.+>gmd:geographicElement', isofunc.HandleExtent)
handlers.WithPath(r'[^>]+>gmd:identificationInfo>[^>]+>gmd:pointOfContact', shared_text)


# A function can be the matcher; it takes (), (el) or (el, path).
def is_ref_sys_code(el, path):
    return el.name == 'gmd:code' and 'gmd:referenceSystemInfo' in path

@handlers.Add(is_ref_sys_code)
def ref_sys_code(el):
    def _(b):
        with b.Elem('p', {'class': 'code'}):
            b.Tag('span', {'class': 'label'}, f.NodeLabel(el.name))
            b.Tag('span', {'class': 'value'}, isofunc.IsoText(el))
    return f.Html(_)


# The map form: select, priority, processChildren and needsChildData.
# A file result names a template and its ${key} substitutions; returning None
# means the element adds nothing.
@handlers.Add({'select': lambda el: len(el.children) > 0, 'priority': -1, 'processChildren': True, 'needsChildData': True})
def block(el, childData):
    if childData:
        return handlers.FileResult('block.html', {'label': f.NodeLabel(el.name), 'childData': childData})
    return None


# The template comes from the formatter directory, not the bundle; a file
# result can be turned into a string with str() to embed it elsewhere.
@handlers.Add('gmd:CI_OnlineResource')
def online_resource(el):
    url = el.Child('gmd:linkage')
    linkage = isofunc.IsoUrlText(url)
    if linkage:
        linkage = f.Html(lambda b: (
            b.Open('div', {'class': 'linkage'}),
            b.Tag('span', {'class': 'label'}, f.NodeLabel('gmd:linkage') + ':'),
            b.Tag('span', {'class': 'value'}, linkage),
            b.Close()))
    return handlers.FileResult('online-resource.html', {
        'resourceLabel': f.NodeLabel(el),
        'name': isofunc.IsoText(el.Child('gmd:name')),
        'desc': isofunc.IsoText(el.Child('gmd:description')),
        'linkage': linkage,
    })


# Request parameters are read through env.
@handlers.Add({'select': lambda el: el.name == 'gmd:MD_DataIdentification' and env.ParamBool('h2IdentInfo'),
               'processChildren': True, 'needsChildData': True})
def identification_info(el, childData):
    def _(b):
        with b.Elem('div', {'class': 'identificationInfo'}):
            b.Tag('h2', None, f.NodeLabel(el))
            b.Raw(childData)
    return f.Html(_)


# Sorters reorder the output of an element's children before it is joined.
# The highest priority sorter matching the parent wins.
@handlers.Sort(re.compile(r'.*'))
def by_name(sd1, sd2):
    return (sd1.el.name > sd2.el.name) - (sd1.el.name < sd2.el.name)


def sort_val(sd):
    if sd.el.name in ('gmd:abstract', 'gmd:pointOfContact'): return 0
    return 1

@handlers.Sort({'select': 'gmd:MD_DataIdentification', 'priority': 5})
def abstract_first(sd1, sd2):
    return sort_val(sd1) - sort_val(sd2)
