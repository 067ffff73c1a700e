__title__ = 'lavatrack'
__author__ = 'PythonistaGuild'
__license__ = 'MIT'
__copyright__ = 'Copyright 2019-Current (c) PythonistaGuild'
__version__ = '1.0.0'

from .buffer import *
from .codec import *
from .exceptions import *
from .track import *
