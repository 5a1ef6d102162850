# cbormap

A small library modelling CBOR map items (major type 5). It keeps the
distinction between **definite** maps, whose number of pair slots is fixed
when they are created, and **indefinite** maps, which grow their storage as
pairs are added.

Everything lives in the `cbormap.maps` module.

## Installation

```
pip install cbormap
```

## Usage

```python
from cbormap.maps import CborMap, MapFullError

# A definite map has room for exactly `size` pairs.
m = CborMap.definite(2)
m.add(1, 2)
m.add(3, 4)
assert len(m) == 2
assert m.is_definite()

try:
    m.add(5, 6)
except MapFullError:
    print("no room left in a definite map")

# An indefinite map grows its storage as needed.
stream = CborMap.indefinite()
stream.add("title", "example glossary")
assert stream.is_indefinite()

for pair in stream:
    print(pair.key, pair.value)

first = stream[0]
print(first.key, first.value)
```

`CborMap(size)` is the same as `CborMap.definite(size)`, and `CborMap()`
(size `None`) is the same as `CborMap.indefinite()`.

Each entry is a `Pair` dataclass with `key` and `value` fields. Iterating
over a map, indexing it and `pairs()` all give the pairs in insertion order.
`pairs()` returns a new list, but the `Pair` objects in it are the ones the
map holds, so changing their fields changes the map.

### Adding keys and values separately

A decoder that sees a key before its value can add the two in steps:

```python
m = CborMap.indefinite()
m.add_key("a")      # the pair's value is None until set
m.add_value(1)      # fills in the value of the last added key
```

### Storage

`allocated()` reports how many pair slots are reserved. A definite map
reserves its full size up front and never grows. An indefinite map starts
with no slots; when it runs out it takes one slot, and after that multiplies
its capacity by `BUFFER_GROWTH` (2).

### Errors

- `MapFullError` (a subclass of `MapError`) is raised when a definite map has
  no free slot left.
- `MapError` is raised by `add_value` when no key has been added yet, and
  when an indefinite map's capacity would grow past 2**64 - 1 slots.
- `ValueError` is raised when a definite map is created with a negative size.

## What this package does not do

It holds map items only. It does not encode maps to CBOR bytes, decode them
from bytes, or model the other CBOR item types (integers, strings, arrays,
tags, floats); keys and values may be any Python objects.

## Running the tests

```
pip install -e ".[test]"
pytest
```