import logging

from . import create_app
from .config import Config

log = logging.getLogger(__name__)


def main(config_class=Config):
    cfg = config_class()
    logging.basicConfig(
        level=getattr(logging, str(cfg.LOG_LEVEL).upper(), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    app = create_app(config_class=config_class)

    log.info('Starting server on port %s', cfg.PORT)
    log.info('Probe command: %s (cache %ss)', cfg.PROBE_COMMAND, cfg.CACHE_TTL_SECONDS)
    log.info('Visit http://localhost:%s to see system information', cfg.PORT)

    # threaded: one worker thread per request, sharing app.probe_cache
    app.run(host=cfg.HOST, port=cfg.PORT, debug=False, threaded=True)


if __name__ == '__main__':
    main()
