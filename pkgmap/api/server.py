from __future__ import annotations
from typing import Any
from flask import Flask, request, jsonify, Response
import logging

from pkgmap.config.env import get_api_config
from pkgmap.location.relativize import relativize
from pkgmap.mapping.errors import ArgumentError, FormatError
from pkgmap.mapping.parser import parse

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Configuration helpers (overridable via app.config in tests)

def _get_api_key() -> str | None:
    if 'API_KEY' in app.config:
        return app.config.get('API_KEY')
    return get_api_config().api_key


def _check_api_key():
    api_key = _get_api_key()
    if api_key:
        provided = request.headers.get('X-API-Key')
        if provided != api_key:
            logger.warning("rejected request to %s: bad api key", request.path)
            return jsonify({'error': 'unauthorized'}), 401
    return None


@app.before_request
def _auth_and_limits():
    unauthorized = _check_api_key()
    if unauthorized is not None:
        return unauthorized
    limit = app.config.get('MAX_BODY_BYTES') or get_api_config().max_body_bytes
    if request.content_length is not None and request.content_length > limit:
        return jsonify({'error': 'payload_too_large'}), 413
    return None


@app.errorhandler(FormatError)
def _format_error(e: FormatError):
    return jsonify({'error': e.message, 'offset': e.offset, 'line': e.line, 'column': e.column}), 400


@app.errorhandler(ArgumentError)
def _argument_error(e: ArgumentError):
    return jsonify({'error': str(e)}), 400


def _require(payload: Any, *names: str):
    if not isinstance(payload, dict):
        return jsonify({'error': 'body must be a JSON object'}), 400
    missing = [n for n in names if not isinstance(payload.get(n), str)]
    if missing:
        return jsonify({'error': f"{', '.join(missing)} is required"}), 400
    return None


@app.post('/resolve')
def post_resolve():
    payload = request.get_json(force=True, silent=True) or {}
    bad = _require(payload, 'mapping', 'base')
    if bad is not None:
        return bad
    uris = payload.get('uris')
    if not isinstance(uris, list) or not all(isinstance(u, str) for u in uris):
        return jsonify({'error': 'uris must be a list of strings'}), 400
    packages = parse(payload['mapping'], payload['base'])
    return jsonify({'locations': [str(packages.resolve(u)) for u in uris]})


@app.post('/relativize')
def post_relativize():
    payload = request.get_json(force=True, silent=True) or {}
    bad = _require(payload, 'location', 'base')
    if bad is not None:
        return bad
    return jsonify({'location': str(relativize(payload['location'], payload['base']))})


@app.post('/normalize')
def post_normalize():
    payload = request.get_json(force=True, silent=True) or {}
    bad = _require(payload, 'mapping', 'base')
    if bad is not None:
        return bad
    for opt in ('output_base', 'comment'):
        if payload.get(opt) is not None and not isinstance(payload[opt], str):
            return jsonify({'error': f'{opt} must be a string'}), 400
    packages = parse(payload['mapping'], payload['base'])
    body = packages.to_text(base_location=payload.get('output_base'), comment=payload.get('comment'))
    return Response(body, mimetype='text/plain')


if __name__ == '__main__':
    app.run(host='0.0.0.0', port=8000)
