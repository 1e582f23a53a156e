"""
Minimal stand-in for the contest server using Flask.

Echoes POSTed bodies, answers with arbitrary status codes on request and keeps
``/aliens/send`` payloads in memory so they can be fetched back by id.
Stored payloads are kept for the life of the process with no limit, which is
fine for local runs and testing, the only use of this server.
"""
import argparse
import logging
import uuid

from flask import Flask, request, Response, redirect, url_for

from . import __version__

logger = logging.getLogger(__name__)

app = Flask(__name__)

# response id -> body, process lifetime only
_responses = {}


@app.route('/health', methods=['GET'])
def health():
    return {'status': 'ok', 'service': 'icfp-stub', 'version': __version__}, 200


def _text(body, status=200) -> Response:
    return Response(body, status=status, mimetype='text/plain')


@app.route('/', methods=['POST'])
def echo():
    data = request.get_data()
    if not data:
        return _text('No data', 400)
    return _text(data)


@app.route('/status/<int:code>', methods=['POST'])
def status(code):
    if not 100 <= code <= 599:
        return _text(f'Invalid status code: {code}', 400)
    body = request.args.get('body')
    if body is None:
        body = request.get_data()
    return _text(body, code)


@app.route('/redirect', methods=['POST'])
def redirect_elsewhere():
    return redirect(url_for('status', code=200, body='OK'), code=302)


@app.route('/aliens/send', methods=['POST'])
def aliens_send():
    if not request.args.get('apiKey'):
        return _text('Missing apiKey', 403)

    data = request.get_data()
    response_id = uuid.uuid4().hex
    _responses[response_id] = data
    logger.info(f"Stored response {response_id} ({len(data)} bytes)")

    resp = _text(data)
    resp.headers['X-Response-Id'] = response_id
    return resp


@app.route('/aliens/<response_id>', methods=['GET'])
def aliens_response(response_id):
    if not request.args.get('apiKey'):
        return _text('Missing apiKey', 403)
    if response_id not in _responses:
        return _text('Unknown response id', 404)
    return _text(_responses[response_id])


def main():
    p = argparse.ArgumentParser(description='Local stub of the contest server')
    p.add_argument('--host', default='127.0.0.1')
    p.add_argument('--port', default=5000, type=int)
    args = p.parse_args()

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logger.info(f"Starting stub server on {args.host}:{args.port}")
    app.run(host=args.host, port=args.port)


if __name__ == '__main__':
    main()
