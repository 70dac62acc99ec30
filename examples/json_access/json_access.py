# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Reading, updating and listing paths of a JSON tree.

Run with::

    python examples/json_access/json_access.py
"""

from __future__ import annotations

import json

from nestac import get_paths, read, update

SOURCE = '''
{
    "foo": {"bar": "bingo!"},
    "networks": {"192.168.0.1": "up"},
    "hello": ["world", "!"]
}
'''


def main() -> None:
    data = json.loads(SOURCE)

    print(read('foo.bar', data))                              # bingo!
    print(read('networks@192.168.0.1', data, separator='@'))  # up
    print(read('hello.[1]', data))                            # !

    old = update(data, 'foo.bar', 'updated!')
    print(old, '->', read('foo.bar', data))                   # bingo! -> updated!

    # Missing keys are never created
    print(update(data, 'foo.missing', 1))                     # None

    for path in get_paths(data):
        print(path)


if __name__ == '__main__':
    main()
