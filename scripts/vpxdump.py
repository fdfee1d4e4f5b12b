#!/usr/bin/env python3
'''
Dump the records of a table file part extracted to disk.

 $ vpxdump.py item GameItem0
 $ vpxdump.py material materials.bin
'''
import logging
import os
import sys

from vpxstruct.exceptions import VPXStructException
from vpxstruct.streams import Stream
from vpxstruct.vpt import unpack_game_item
from vpxstruct.vpt.material import MaterialData, PhysicsMaterialData


if 'DEBUG' in os.environ:
    logging.basicConfig(level=logging.DEBUG)
else:
    logging.basicConfig(level=logging.WARNING)


RECORDS = {
    'material': MaterialData,
    'physics-material': PhysicsMaterialData,
}


def usage(progname):
    print(f'usage: {progname} {{item,{",".join(RECORDS)}}} <path>')
    sys.exit(1)


def dump_item(path):
    with Stream(path) as stream:
        item_type, item = unpack_game_item(stream)

    print(f'Item type: {item_type.name}')
    print(item)

    for idx, drag_point in enumerate(getattr(item, 'drag_points', [])):
        print(f'  [{idx:02d}] {drag_point}')


def dump_records(path, cls):
    with Stream(path) as stream:
        idx = 0
        while not stream.is_eof():
            record = cls()
            record.unpack(stream)
            print(f'[{idx:02d}] 0x{record.offset:08x}')
            print(record)
            idx += 1


if __name__ == '__main__':
    if len(sys.argv) < 3:
        usage(sys.argv[0])

    kind, path = sys.argv[1], sys.argv[2]

    try:
        if kind == 'item':
            dump_item(path)
        elif kind in RECORDS:
            dump_records(path, RECORDS[kind])
        else:
            usage(sys.argv[0])
    except VPXStructException as e:
        print(f'error: {e} [{e.path}]', file=sys.stderr)
        sys.exit(2)
