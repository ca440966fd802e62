""" Environment-driven settings. Nothing here is cached; each call reads
    the environment anew, so a test or a wrapper script can adjust a
    setting before a :class:`specialremote.Session` is created.
"""

import logging
import os

PROGRESS = 'SPECIALREMOTE_PROGRESS'
PROGRESS_INTERVAL = 'SPECIALREMOTE_PROGRESS_INTERVAL'
PROGRESS_BYTES = 'SPECIALREMOTE_PROGRESS_BYTES'
LOG_LEVEL = 'SPECIALREMOTE_LOG_LEVEL'
LOG_JSON = 'SPECIALREMOTE_LOG_JSON'

default_interval = 0.5
default_threshold = 256 * 1024

_true = set(('1', 'true', 'yes', 'on'))
_false = set(('', '0', 'false', 'no', 'off'))


def progress():
    """ Return an (interval, threshold) pair describing the configured
        progress throttle. Exactly one of the two is not None: the time
        preset yields an interval in seconds, the byte preset a threshold
        in bytes.
    """

    policy = os.environ.get(PROGRESS, 'time').strip().lower()

    if policy == 'time':
        interval = _number(PROGRESS_INTERVAL, default_interval, float)
        return interval, None

    if policy == 'bytes':
        threshold = _number(PROGRESS_BYTES, default_threshold, int)
        return None, threshold

    raise ValueError("%s must be 'time' or 'bytes', not %r" % (PROGRESS, policy))



def log_level():
    """ Return the configured logging level as an integer.
    """

    name = os.environ.get(LOG_LEVEL, 'WARNING').strip().upper()
    level = logging.getLevelName(name)

    if isinstance(level, int):
        return level

    raise ValueError('%s is not a valid level: %r' % (LOG_LEVEL, name))



def log_json():
    """ Return True if log lines should be rendered as JSON.
    """

    value = os.environ.get(LOG_JSON, '').strip().lower()

    if value in _true:
        return True
    if value in _false:
        return False

    raise ValueError('%s must be a boolean, not %r' % (LOG_JSON, value))



def _number(variable, default, cast):

    try:
        raw = os.environ[variable]
    except KeyError:
        return default

    try:
        value = cast(raw)
    except ValueError:
        raise ValueError('%s must be a number, not %r' % (variable, raw))

    if value <= 0:
        raise ValueError('%s must be positive, not %r' % (variable, raw))

    return value


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
