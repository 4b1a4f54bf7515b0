import flask

from mdformatter import app
import mdformatter.render.controllers as controllers
from mdformatter.modules.error_handling import InvalidUsage
from mdformatter.modules.log import print_log

# query parameters consumed by the service itself; everything else goes to env.Param()
RESERVED_PARAMS = ('lang', 'schema')


def check_formatter(name):
    if not controllers.formatter_exists(name):
        raise InvalidUsage("Formatter does not exist.", status_code=404, enum="FORMATTER_DOESNT_EXIST")


@app.route('/api/formatter/list', methods=['GET'])
def fm_list_formatters():
    rv = controllers.list_formatters()
    return flask.make_response(flask.jsonify({'formatters': rv}), 200)


@app.route('/api/formatter/<string:name>/describe', methods=['GET'])
def fm_describe_formatter(name):
    check_formatter(name)
    schema = flask.request.args.get('schema', default=None)
    rv = controllers.describe_formatter(name, schema)
    return flask.make_response(flask.jsonify(rv), 200)


@app.route('/api/formatter/<string:name>/apply', methods=['POST'])
def fm_apply_formatter(name):
    check_formatter(name)
    xml = flask.request.get_data()
    if not xml:
        raise InvalidUsage("Invalid API call: metadata record is missing.", status_code=422, enum="POST_ERROR")
    lang = flask.request.args.get('lang', default=None)
    schema = flask.request.args.get('schema', default=None)
    params = {key: value for key, value in flask.request.args.items() if key not in RESERVED_PARAMS}
    print_log(app.name, 'Apply formatter {0} lang={1} params={2}'.format(name, lang, sorted(params)))
    html = controllers.apply_formatter(name, xml, params=params, lang=lang, schema=schema)
    response = flask.make_response(html, 200)
    response.mimetype = 'text/html'
    return response


@app.route('/api/formatter/reload', methods=['POST'])
def fm_reload_formatters():
    controllers.reload_formatters()
    return flask.make_response({'reloaded': True}, 200)
