from flask import jsonify
import lxml.etree

from mdformatter import app
from mdformatter.modules.formatter.errors import ConfigurationError, FormatterError
from mdformatter.modules.log import print_error


class InvalidUsage(Exception):
    status_code = 400
    enum = "ERROR"

    def __init__(self, message, status_code=None, enum=None):
        Exception.__init__(self)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if enum is not None:
            self.enum = enum

    def to_dict(self):
        rv = dict()
        rv['message'] = self.message
        rv['status_code'] = self.status_code
        rv['enum'] = self.enum
        return rv

    @staticmethod
    def from_formatter_error(error):
        if isinstance(error, ConfigurationError):
            return InvalidUsage(error.message, status_code=422, enum=error.enum)
        path = getattr(error, 'path', None)
        message = error.message if path is None else '{0} (at {1})'.format(error.message, path)
        return InvalidUsage(message, status_code=500, enum=error.enum)


@app.errorhandler(InvalidUsage)
def handle_invalid_usage(error):
    response = jsonify(error.to_dict())
    response.status_code = error.status_code
    return response


@app.errorhandler(FormatterError)
def handle_formatter_error(error):
    print_error(app.name, 'Formatter error: {0}'.format(error.message))
    return handle_invalid_usage(InvalidUsage.from_formatter_error(error))


@app.errorhandler(lxml.etree.XMLSyntaxError)
def handle_xml_error(error):
    return handle_invalid_usage(InvalidUsage('Metadata record is not well-formed XML: {0}'.format(error), status_code=400, enum='XML_ERROR'))
