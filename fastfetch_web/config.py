import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    PROBE_COMMAND     = os.environ.get('PROBE_COMMAND', 'fastfetch')
    PROBE_TIMEOUT     = int(os.environ.get('PROBE_TIMEOUT', '30'))  # 0 disables
    CACHE_TTL_SECONDS = int(os.environ.get('CACHE_TTL_SECONDS', '60'))

    HOST      = os.environ.get('HOST', '0.0.0.0')
    PORT      = int(os.environ.get('PORT', '3131'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    PAGE_TITLE = os.environ.get('PAGE_TITLE', 'FastFetch System Information')

    @property
    def probe_timeout(self):
        """Timeout handed to subprocess.run; None when disabled."""
        return self.PROBE_TIMEOUT if self.PROBE_TIMEOUT > 0 else None
