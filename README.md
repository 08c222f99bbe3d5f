# singlylist

A small singly linked list for Python. It holds values of any type. You can add values at the front, at the back or at a given index. You can remove values by index and look them up by index. The list also supports `len()`, iteration and a readable `repr()`.

## Installation

```
pip install singlylist
```

Install with the test extras to run the test suite:

```
pip install "singlylist[test]"
pytest
```

## Usage

```python
from singlylist.linked_list import LinkedList

items = LinkedList()
items.push_front(4)
items.push_front(5)
items.get(0)        # 5

items.remove(0)     # the list now holds 4 only
items.push_back(100)
items.add_at(50, 1) # places 50 before the value now at index 1

list(items)         # [4, 50, 100]
len(items)          # 3
items               # LinkedList([4, 50, 100])
```

You can also build a list from any iterable. The values keep their order:

```python
items = LinkedList([1, 2, 3])
```

### Behaviour

- `get(idx)` returns the value at `idx`. It returns `None` when the index is past the end or negative.
- `add_at(value, idx)` inserts before the value now at `idx`. `idx` may equal the length of the list, which appends. An index past that, or a negative one, raises `IndexError`.
- `remove(idx)` raises `IndexError` when there is no value at `idx`.
- `push_front(value)` and `push_back(value)` always succeed. `push_back` walks the list to its end, so it takes time in proportion to the length.
- Iterating yields the values from first to last.

## Demo

The `singlylist.demo` module runs through the list operations and prints the first value twice along the way:

```
singlylist-demo
```

It prints:

```
First value: 5
First value: 4
```

The demo takes no options. It is a library showcase, not an interactive tool.