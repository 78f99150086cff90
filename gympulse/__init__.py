"""GymPulse - personal workout tracker core.

Session logging, set validation and daily streak tracking backed by a
single versioned JSON snapshot on local storage.
"""

__version__ = "0.1.0"
