# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for read, update, contains and resolve."""

import copy

import pytest
import tomlkit

from nestac import (
    InvalidPathError,
    JsonAdapter,
    UnsupportedValueError,
    ValueKind,
    contains,
    read,
    resolve,
    update,
)

_SENTINEL = object()


@pytest.fixture
def tree():
    return {
        'foo': {'bar': 'bingo!'},
        'list': ['a', {'inner': 'world'}],
        'nothing': None,
        'flag': False,
    }


class TestRead:
    """Tests for read."""

    def test_read_flat(self):
        """Test reading a root key."""
        assert read('foo', {'foo': 'bar'}) == 'bar'

    def test_read_inner_key(self):
        """Test reading a nested key."""
        assert read('foo.bar', {'foo': {'bar': 'bingo!'}}) == 'bingo!'

    def test_read_custom_separator(self):
        """Test reading with '|' and '@' separators."""
        data = {'foo': {'bar': 'bingo!'}}
        assert read('foo|bar', data, '|') == 'bingo!'
        assert read('networks@192.168.0.1', {'networks': {'192.168.0.1': 'up'}}, separator='@') == 'up'

    def test_read_array_bracketed(self):
        """Test reading sequence items with [N] segments."""
        assert read('foo.[0]', {'foo': ['bingo!']}) == 'bingo!'
        assert read('foo.[0].bar', {'foo': [{'bar': 'bingo!'}]}) == 'bingo!'

    def test_read_array_bare(self, tree):
        """Test reading sequence items with bare index segments."""
        assert read('list.0', tree) == 'a'
        assert read('list.1.inner', tree) == 'world'

    def test_read_returns_node_not_copy(self, tree):
        """Test the returned container is the one in the tree."""
        assert read('foo', tree) is tree['foo']

    def test_read_sequence_root(self):
        """Test a sequence can be the root."""
        assert read('1', ['x', 'y']) == 'y'
        assert read('1', ('x', 'y')) == 'y'

    def test_read_segments(self):
        """Test a pre-split path may contain the separator."""
        data = {'networks': {'192.168.0.1': 'up'}}
        assert read(['networks', '192.168.0.1'], data) == 'up'

    @pytest.mark.parametrize('path', [
        'missing',
        'foo.missing',
        'missing.bar',
        'foo.bar.baz',
        'list.2',
        'list.x',
        'list.-1',
        'flag.x',
        'nothing.x',
    ])
    def test_read_miss(self, tree, path):
        """Test every kind of miss returns the default."""
        assert read(path, tree) is None
        assert read(path, tree, default=_SENTINEL) is _SENTINEL

    def test_read_null_vs_missing(self, tree):
        """Test a present null differs from a missing key with a sentinel."""
        assert read('nothing', tree, default=_SENTINEL) is None
        assert contains('nothing', tree)
        assert not contains('absent', tree)

    def test_read_false_value(self, tree):
        """Test falsy leaves are returned, not treated as misses."""
        assert read('flag', tree, default=_SENTINEL) is False

    def test_read_leading_zero_index_misses(self):
        """Test an index has a single spelling."""
        data = {'l': list(range(10))}
        assert read('l.7', data) == 7
        assert read('l.007', data, default=_SENTINEL) is _SENTINEL
        assert read('l.[07]', data, default=_SENTINEL) is _SENTINEL

    def test_read_index_on_map_is_key(self):
        """Test digit segments on maps are plain keys."""
        assert read('0', {'0': 'zero'}) == 'zero'
        assert read('[0]', {'0': 'zero'}) is None

    @pytest.mark.parametrize('path', ['', 'foo.', '.foo', 'foo..bar'])
    def test_read_invalid_path_raises(self, tree, path):
        """Test malformed paths raise instead of returning default."""
        with pytest.raises(InvalidPathError):
            read(path, tree)

    def test_read_escaped_key(self):
        """Test keys holding the separator are reachable with an escape."""
        data = {'networks': {'192.168.0.1': 'up'}}
        assert read('networks.192\\.168\\.0\\.1', data, escape='\\') == 'up'

    def test_read_explicit_adapter(self):
        """Test an explicit adapter is used for the whole descent."""
        assert read('a.0', {'a': [1]}, adapter=JsonAdapter()) == 1

    def test_read_through_unsupported_node(self):
        """Test descending into an unknown node type raises."""
        with pytest.raises(UnsupportedValueError):
            read('a.b', {'a': object()})


class TestResolve:
    """Tests for resolve."""

    def test_resolve_returns_value(self, tree):
        """Test resolve wraps the node."""
        value = resolve('foo', tree)
        assert value.kind is ValueKind.MAP
        assert value.data is tree['foo']

    def test_resolve_null(self, tree):
        """Test a null node resolves to a NULL Value."""
        assert resolve('nothing', tree).is_null

    def test_resolve_missing(self, tree):
        """Test a miss resolves to None."""
        assert resolve('foo.nope', tree) is None


class TestUpdate:
    """Tests for update."""

    def test_update_root_key(self):
        """Test a one-segment path updates a direct child."""
        data = {'foo': 'bingo!'}
        assert update(data, 'foo', 'updated!') == 'bingo!'
        assert read('foo', data) == 'updated!'

    def test_update_inner_key(self):
        """Test updating a nested key returns the old value."""
        data = {'foo': {'bar': 'bingo!'}}
        assert update(data, 'foo.bar', 'updated!') == 'bingo!'
        assert read('foo.bar', data) == 'updated!'

    def test_update_custom_separator(self):
        """Test updating with a custom separator."""
        data = {'foo': {'192.168.0.1': 'bingo!'}}
        assert update(data, 'foo@192.168.0.1', 'updated!', '@') == 'bingo!'
        assert read('foo@192.168.0.1', data, '@') == 'updated!'

    def test_update_sequence_item(self, tree):
        """Test updating sequence items with bare and bracketed indices."""
        assert update(tree, 'list.0', 'b') == 'a'
        assert update(tree, 'list.[1].inner', 'moon') == 'world'
        assert tree['list'] == ['b', {'inner': 'moon'}]

    def test_update_replaces_container(self, tree):
        """Test a whole subtree can be replaced."""
        old = update(tree, 'foo', [1, 2])
        assert old == {'bar': 'bingo!'}
        assert read('foo.1', tree) == 2

    def test_update_null_slot(self, tree):
        """Test an existing null slot can be replaced."""
        assert update(tree, 'nothing', 'something', default=_SENTINEL) is None
        assert tree['nothing'] == 'something'

    @pytest.mark.parametrize('path', [
        'missing',
        'foo.missing',
        'missing.bar',
        'foo.bar.baz',
        'list.2',
        'list.x',
        'list.1.missing',
        'nothing.x',
    ])
    def test_update_miss_leaves_tree_untouched(self, tree, path):
        """Test failed updates change nothing and return default."""
        before = copy.deepcopy(tree)
        assert update(tree, path, 'x', default=_SENTINEL) is _SENTINEL
        assert tree == before

    def test_update_inside_tuple_returns_default(self):
        """Test items of an immutable sequence are not replaced."""
        data = {'pair': ('a', 'b')}
        assert update(data, 'pair.0', 'z', default=_SENTINEL) is _SENTINEL
        assert data == {'pair': ('a', 'b')}

    def test_update_never_inserts(self):
        """Test a missing final key is not added."""
        data = {'foo': {'bar': 'bingo!'}}
        assert update(data, 'foo.new', 1) is None
        assert data == {'foo': {'bar': 'bingo!'}}

    def test_update_invalid_path_raises(self, tree):
        """Test malformed paths raise."""
        with pytest.raises(InvalidPathError):
            update(tree, '', 'x')

    def test_update_then_read(self, tree):
        """Test the value written is the value read back."""
        before = read('list.1.inner', tree)
        new = {'deep': True}
        old = update(tree, 'list.1.inner', new)
        assert old == before
        assert read('list.1.inner', tree) is new


class TestTomlNavigation:
    """Tests for read and update on tomlkit documents."""

    def test_read_toml(self):
        """Test reading a table key."""
        doc = tomlkit.parse('[foo]\nbar = "bingo!"\n')
        assert read('foo.bar', doc) == 'bingo!'
        assert read('foo@bar', doc, '@') == 'bingo!'

    def test_read_toml_nested_tables(self):
        """Test reading through nested tables and arrays."""
        doc = tomlkit.parse(
            '[foo]\n'
            '[foo.bar]\n'
            'baz = ["hello", {inner = "world"}]\n'
        )
        assert read('foo.bar.baz.[0]', doc) == 'hello'
        assert read('foo.bar.baz.[1].inner', doc) == 'world'

    def test_read_toml_bool(self):
        """Test booleans read as booleans."""
        doc = tomlkit.parse('flag = true\n')
        assert read('flag', doc) is True
        assert resolve('flag', doc).kind is ValueKind.BOOLEAN

    def test_update_toml_root_key(self):
        """Test updating a top-level key."""
        doc = tomlkit.parse('foo = "bingo!"\n')
        assert update(doc, 'foo', 'updated!') == 'bingo!'
        assert tomlkit.dumps(doc) == 'foo = "updated!"\n'

    def test_update_toml_deep_key(self):
        """Test updating keys in tables and inline tables."""
        doc = tomlkit.parse('[foo]\nbar = {doo = "bingo!"}\n')
        assert update(doc, 'foo.bar.doo', 'updated!') == 'bingo!'
        assert read('foo.bar.doo', doc) == 'updated!'

    def test_update_toml_array(self):
        """Test updating array items."""
        doc = tomlkit.parse('[foo]\nbar = ["bingo!"]\n')
        assert update(doc, 'foo.bar.[0]', 'updated!') == 'bingo!'
        assert read('foo.bar.0', doc) == 'updated!'

    def test_update_toml_keeps_comments(self):
        """Test unrelated comments and layout survive an update."""
        text = '# settings\n[foo]\nbar = "bingo!"\n\n[other]\nkeep = 1\n'
        doc = tomlkit.parse(text)
        update(doc, 'foo.bar', 'updated!')
        assert tomlkit.dumps(doc) == text.replace('bingo!', 'updated!')

    def test_update_toml_miss(self):
        """Test a miss leaves the document text unchanged."""
        text = '[foo]\nbar = "bingo!"\n'
        doc = tomlkit.parse(text)
        assert update(doc, 'foo.nope', 1) is None
        assert tomlkit.dumps(doc) == text
