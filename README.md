# proptree

A small library for hierarchical property trees. Each tree node holds a string
value and an ordered list of keyed children. Keys may repeat. Children can be
looked up by key, and paths such as `a.b.c` reach into nested nodes.

## Installation

```
pip install proptree
```

To install and run the test suite:

```
pip install "proptree[test]"
pytest
```

## Trees

```python
from proptree.ptree import PropertyTree

tree = PropertyTree()
tree.put("server.port", 8080)
tree.put("server.host", "localhost")
tree.add("server.alias", "one")
tree.add("server.alias", "two")

tree.get("server.port", int)             # 8080
tree.get("server.timeout", int, 30)      # 30, the default
tree.get_child("server").count("alias")  # 2
```

Reading values:

- `get` and `get_child` raise `PtreeBadPath` when the path does not exist and
  no default is given.
- `get` and `get_value` raise `PtreeBadData` when the stored text cannot be
  converted to the type you ask for.
- `get_optional`, `get_value_optional` and `get_child_optional` return `None`
  in those cases instead.

All three error classes derive from `PtreeError`, which is a `RuntimeError`.

Writing values:

- `put` replaces the value of the first child with a matching key, or creates
  the child.
- `add` always appends a new child.
- `put_child` and `add_child` do the same with whole subtrees. They store a
  copy of the subtree and return that stored copy.

Paths:

- `split_path(path, separator)` shows how a path is read. An empty string
  names the tree itself.
- A list of keys can be passed wherever a path is expected.

`CaseInsensitivePropertyTree` compares keys without regard to case.

## Value conversion

`proptree.translator.StreamTranslator` turns values into text and text back
into values. `translator_for(type_)` returns the translator for a type.

- Leading and trailing whitespace is ignored when reading.
- Floats are written with 17 significant digits.
- Booleans are written as `true` and `false`. They are read from `1`, `0`,
  `true` or `false`.
- Any other type is read by calling the type on the text.

## Containers

`proptree.basic_tree.BasicTree` is the container the trees are built on. It
supports:

- `len()`, and iteration over `(key, child)` pairs in insertion order
- `reversed()` and equality
- adding children: `push_back`, `push_front`, `insert`
- removing children: `pop_front`, `pop_back`, `erase_at`, `erase`
- lookup by key: `find`, `count`, `equal_range`, `ordered`, `keys_equal`
- whole-tree operations: `sort`, `reverse`, `swap`, `copy`, `clear`, `empty`,
  `front`, `back`

`find` returns the first matching child, or `None` if there is none.

## JSON output

```python
from proptree.json_writer import to_json_string

to_json_string(tree, pretty=False)
```

How a tree is written:

- Leaves are written as strings.
- A node whose children all have empty keys is written as an array.
- Any other node is written as an object.
- The output ends with a newline.
- Pretty output indents by four spaces.

A tree that cannot be written as JSON raises `JsonParserError`. This happens
when the root holds a value, or when a node holds both a value and children.
`verify_json` performs this check on its own.

`write_json(stream, tree, pretty, filename)` writes to an open text stream.
`create_escapes` escapes a single string.

## Building trees from JSON events

`proptree.json_callbacks.StandardCallbacks` builds a `PropertyTree` from the
events a JSON parser emits:

```python
from proptree.json_callbacks import StandardCallbacks

cb = StandardCallbacks()
cb.on_begin_object()
cb.on_begin_string()
cb.on_code_units("a")
cb.on_end_string()
cb.on_number("1")
cb.on_end_object()
cb.output().get("a")  # "1"
```

`proptree.json_encoding` provides the UTF-8 helpers for JSON text held as
bytes:

- `is_ws`
- `decode_hexdigit`
- `encode_codepoint`
- `read_codepoint`, which raises `EncodingError` on invalid sequences
- `skip_introduction`, which skips a byte order mark

## INFO grammar check

`proptree.info_grammar.is_valid_info(text)` reports whether text follows the
INFO format grammar. The grammar covers:

- keys with optional values
- quoted strings with escapes
- `\`-joined string continuations
- `{ }` blocks
- `;` comments

From the command line:

```
proptree-info-check config.info
```

The command prints `Parse result: Success` or `Parse result: Failure` for each
file given. A file that cannot be read is reported on standard error, and the
exit status is then 1. With no arguments, it checks two built-in sample
documents.

## What this package does not do

- There is no function that turns JSON text into a tree. `StandardCallbacks`
  must be driven by a parser of your own.
- The INFO support only checks syntax. It does not build a tree from INFO
  text, does not write INFO, and does not handle `#include`.
- There is no reader or writer for XML or INI files.