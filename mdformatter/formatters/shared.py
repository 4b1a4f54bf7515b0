from mdformatter.modules.formatter.markup import Html


def shared_text(el):
    """Plain paragraph with the whole text content of 'el', for elements that need no structure."""
    text = " ".join(el.text.split())
    if not text: return None
    return Html(lambda b: b.Tag("p", {"class": "md-shared-text"}, text))
