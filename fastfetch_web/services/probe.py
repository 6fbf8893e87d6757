import logging
import shlex
import subprocess

log = logging.getLogger(__name__)


class ProbeInvocationError(Exception):
    """Raised when the probe command cannot be run or exits abnormally."""


def _argv(command):
    if isinstance(command, str):
        return shlex.split(command)
    return list(command)


def run_probe(command, timeout=None):
    """Run the probe command and return its stdout as text.

    stdout is decoded as UTF-8 with replacement; embedded ANSI escapes are
    kept as-is. Spawn failures, timeouts and non-zero exits all surface as
    ProbeInvocationError with the original exception chained.
    """
    argv = _argv(command)
    if not argv:
        raise ProbeInvocationError('probe invocation failed: empty command')
    try:
        result = subprocess.run(argv, capture_output=True, timeout=timeout, check=True)
    except subprocess.CalledProcessError as exc:
        tail = (exc.stderr or b'').decode('utf-8', errors='replace').strip()[-300:]
        msg = f'probe invocation failed: {argv[0]} exited with status {exc.returncode}'
        if tail:
            msg += f': {tail}'
        raise ProbeInvocationError(msg) from exc
    except subprocess.TimeoutExpired as exc:
        raise ProbeInvocationError(
            f'probe invocation failed: {argv[0]} timed out after {timeout}s'
        ) from exc
    except OSError as exc:
        raise ProbeInvocationError(f'probe invocation failed: {exc}') from exc

    log.debug('Probe %s produced %d bytes', argv[0], len(result.stdout))
    return result.stdout.decode('utf-8', errors='replace')
