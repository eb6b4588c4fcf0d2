"""
Audible alert signalled when the model rejects an edit
"""

import logging
import sys

import numpy as np
from IPython import get_ipython
from IPython.display import Audio, display

from .. import defaults

logger = logging.getLogger(__name__)

_tone = None


def alert_tone():
    """Short decaying sine tone, as float samples at ``ALERT_SAMPLE_RATE``."""
    global _tone
    if _tone is None:
        rate = defaults.ALERT_SAMPLE_RATE
        t = np.arange(int(rate * defaults.ALERT_DURATION_S)) / rate
        _tone = np.sin(2 * np.pi * defaults.ALERT_FREQUENCY_HZ * t) * np.exp(-defaults.ALERT_DECAY * t)
    return _tone


def _in_kernel():
    shell = get_ipython()
    return shell is not None and getattr(shell, 'kernel', None) is not None


def beep():
    """
    Signal a rejected edit. Plays a tone in a notebook kernel, otherwise
    rings the terminal bell.
    """
    logger.debug("Alert")
    if _in_kernel():
        display(Audio(alert_tone(), rate=defaults.ALERT_SAMPLE_RATE, autoplay=True))
    else:
        sys.stdout.write('\a')
        sys.stdout.flush()
