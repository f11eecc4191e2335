"""
DataStream API client.

See: https://techdocs.akamai.com/datastream2/v1/reference/api
"""

from .activation import Activation
from .properties import Properties
from .stream import Stream


class DataStream(Activation, Properties, Stream):
    """DataStream API: stream activation, eligible properties and streams."""
