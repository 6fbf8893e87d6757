import logging

from flask import Flask, make_response

from .config import Config
from .services.cache import ResultCache
from .services.probe import run_probe

log = logging.getLogger(__name__)

__version__ = '0.1.0'


def create_app(config_class=Config, probe_cache=None):
    app = Flask(__name__)
    cfg = config_class()

    # Store config object on app for request handlers
    app.fastfetch_config = cfg

    # The cache lives with this app instance; tests inject their own.
    if probe_cache is None:
        probe_cache = ResultCache(
            lambda: run_probe(cfg.PROBE_COMMAND, timeout=cfg.probe_timeout),
            ttl=cfg.CACHE_TTL_SECONDS,
        )
    app.probe_cache = probe_cache

    # Register blueprints
    from .blueprints.dashboard import bp as dashboard_bp
    from .blueprints.api       import bp as api_bp

    app.register_blueprint(dashboard_bp)
    app.register_blueprint(api_bp)

    # Security headers on every response
    @app.after_request
    def _security_headers(response):
        response.headers.setdefault('X-Content-Type-Options', 'nosniff')
        response.headers.setdefault('X-Frame-Options', 'DENY')
        response.headers.setdefault('Referrer-Policy', 'same-origin')
        return response

    # Error handlers
    @app.errorhandler(404)
    def not_found(e):
        return plain_response('Not found', 404)

    @app.errorhandler(405)
    def method_not_allowed(e):
        resp = plain_response('Method not allowed', 405)
        resp.headers['Allow'] = ', '.join(e.valid_methods or ())
        return resp

    @app.errorhandler(500)
    def server_error(e):
        cause = getattr(e, 'original_exception', None)
        log.error('Request failed: %s', cause or e, exc_info=cause)
        return plain_response('Internal server error', 500)

    return app


def plain_response(message, status):
    resp = make_response(message + '\n', status)
    resp.mimetype = 'text/plain'
    return resp
