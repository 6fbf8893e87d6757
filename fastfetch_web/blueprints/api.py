from flask import Blueprint, current_app, jsonify

from .. import plain_response

bp = Blueprint('api', __name__)


@bp.route('/health')
def health():
    return plain_response('OK', 200)


@bp.route('/api/status')
def api_status():
    """Cache state only; never runs the probe."""
    cfg = current_app.fastfetch_config
    cache = current_app.probe_cache
    age = cache.age()
    return jsonify({
        'cached': age is not None,
        'age_seconds': round(age, 3) if age is not None else None,
        'ttl_seconds': cache.ttl,
        'command': cfg.PROBE_COMMAND,
    })
