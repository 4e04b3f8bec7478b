"""
Jobly: job and company listings API.
"""

__version__ = "1.0.0"
