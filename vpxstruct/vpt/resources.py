'''
The application ships a few textures of its own (the parts of the bumpers)
that tables refer to without embedding them. They are provided explicitly by a
ResourceProvider instead of being loaded as a side effect of an import.
'''
import logging
import os
from typing import Dict, Iterable, Optional

from .texture import Texture


logger = logging.getLogger(__name__)


BUMPER_BASE   = 'BumperBase'
BUMPER_CAP    = 'BumperCap'
BUMPER_RING   = 'BumperRing'
BUMPER_SOCKET = 'BumperSocket'

LOCAL_TEXTURES = (
    BUMPER_BASE,
    BUMPER_CAP,
    BUMPER_RING,
    BUMPER_SOCKET,
)


class ResourceProvider(object):
    '''Maps a resource name to the bytes of an image file.'''

    def __init__(self, resources: Optional[Dict[str, bytes]] = None):
        self._resources = dict(resources or {})
        self._textures: Dict[str, Texture] = {}

    def __contains__(self, name):
        return name in self._resources

    @classmethod
    def from_directory(cls, path: str, names: Iterable[str] = LOCAL_TEXTURES) -> "ResourceProvider":
        '''Look for "<name>.<any extension>" inside path for each of the names.'''
        resources = {}
        entries = sorted(os.listdir(path))

        for name in names:
            matches = [_ for _ in entries if os.path.splitext(_)[0] == name]
            if not matches:
                logger.warning('resource \'%s\' not found in %s', name, path)
                continue

            with open(os.path.join(path, matches[0]), 'rb') as f:
                resources[name] = f.read()

        return cls(resources)

    def get(self, name: str) -> bytes:
        if name not in self._resources:
            raise KeyError(f'no resource named \'{name}\'')

        return self._resources[name]

    def texture(self, name: str) -> Texture:
        '''The texture for the resource, built once and then reused.'''
        if name not in self._textures:
            self._textures[name] = Texture.from_resource(name, self.get(name))

        return self._textures[name]

    def local_textures(self) -> Dict[str, Texture]:
        return {name: self.texture(name) for name in LOCAL_TEXTURES if name in self}
