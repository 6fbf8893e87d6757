import logging

from flask import Blueprint, abort, current_app, render_template, request
from jinja2 import TemplateError

from .. import plain_response
from ..services.ansi import ansi_to_html

log = logging.getLogger(__name__)

bp = Blueprint('dashboard', __name__)


@bp.route('/', methods=['GET'], provide_automatic_options=False)
def dashboard():
    # werkzeug adds HEAD to every GET rule; only a real GET is served here
    if request.method != 'GET':
        abort(405, valid_methods=['GET'])
    cfg = current_app.fastfetch_config
    output, error = current_app.probe_cache.get()
    if error is not None:
        log.warning('Probe failed: %s', error)
        return plain_response(f'Error getting system info: {error}', 500)

    try:
        return render_template(
            'index.html',
            title=cfg.PAGE_TITLE,
            output=ansi_to_html(output),
        )
    except TemplateError:
        log.exception('Template rendering failed')
        return plain_response('Internal server error', 500)
