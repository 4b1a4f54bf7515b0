"""
Complete view of an ISO19139 record built only from the schema plugin's
default handlers.  No roots are registered, so rendering starts at the
root element of the record.
"""
from mdformatter.schemas.iso19139.formatter.handlers import TIso19139Handlers

TIso19139Handlers(handlers, f, env).AddDefaultHandlers()
